"""
업로드 이미지를 고정 규격(기본 450x350)으로 가운데 크롭 후 리사이즈하는 변환 엔진입니다.

The crop geometry is computed first from the source dimensions so the
extracted rectangle already matches the target aspect ratio; the resize step
is a cover-fit that fills the whole canvas.
"""
import logging
import math
import os
from dataclasses import dataclass
from typing import Tuple

from PIL import Image, ImageOps, UnidentifiedImageError

from app.config import settings
from app.exceptions import ImageDecodeError, ImageWriteError

logger = logging.getLogger(__name__)

OUTPUT_FORMAT = "JPEG"
PARTIAL_SUFFIX = ".part"


def round_half_up(value: float) -> int:
    # Python round() is banker's rounding; crop offsets round .5 upward.
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class CropBox:
    left: int
    top: int
    width: int
    height: int

    def as_box(self) -> Tuple[int, int, int, int]:
        """Return the (left, upper, right, lower) tuple Pillow expects."""
        return (self.left, self.top, self.left + self.width, self.top + self.height)


@dataclass(frozen=True)
class TransformResult:
    destination: str
    source_size: Tuple[int, int]
    crop: CropBox
    output_size: Tuple[int, int]


def compute_crop_box(width: int, height: int, target_width: int, target_height: int) -> CropBox:
    """
    Compute the centered crop that matches target_width:target_height.

    Args:
        width: Source width in pixels
        height: Source height in pixels
        target_width: Output width in pixels
        target_height: Output height in pixels

    Returns:
        CropBox inside the source bounds. Wider sources are trimmed
        horizontally (top=0), taller or equal ones vertically (left=0).
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid source dimensions: {width}x{height}")

    target_ratio = target_width / target_height

    if width / height > target_ratio:
        crop_width = max(1, round_half_up(height * target_ratio))
        left = round_half_up((width - crop_width) / 2)
        return CropBox(left=left, top=0, width=crop_width, height=height)

    crop_height = max(1, round_half_up(width / target_ratio))
    top = round_half_up((height - crop_height) / 2)
    return CropBox(left=0, top=top, width=width, height=crop_height)


def _flatten_to_rgb(img: Image.Image) -> Image.Image:
    # JPEG has no alpha channel; composite transparent pixels onto white.
    if img.mode in ("RGBA", "LA", "P", "PA"):
        rgba = img.convert("RGBA")
        background = Image.new("RGB", rgba.size, (255, 255, 255))
        background.paste(rgba, mask=rgba.getchannel("A"))
        return background
    if img.mode != "RGB":
        return img.convert("RGB")
    return img


def _remove_quietly(path: str):
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Failed to remove partial output %s: %s", path, e)


class ImageTransformer:
    """Fixed-geometry crop-and-resize transform for managed images."""

    def __init__(self, target_width: int = 450, target_height: int = 350, quality: int = 90):
        if target_width <= 0 or target_height <= 0:
            raise ValueError(f"Invalid target size: {target_width}x{target_height}")
        self.target_width = target_width
        self.target_height = target_height
        self.quality = quality

    @classmethod
    def from_settings(cls) -> "ImageTransformer":
        return cls(
            target_width=settings.IMAGE_TARGET_WIDTH,
            target_height=settings.IMAGE_TARGET_HEIGHT,
            quality=settings.IMAGE_JPEG_QUALITY,
        )

    @property
    def target_size(self) -> Tuple[int, int]:
        return (self.target_width, self.target_height)

    def _render(self, source: str) -> Tuple[Image.Image, Tuple[int, int], CropBox]:
        try:
            with Image.open(source) as img:
                img.load()
                source_size = img.size
                crop = compute_crop_box(img.width, img.height, self.target_width, self.target_height)
                cropped = _flatten_to_rgb(img.crop(crop.as_box()))
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise ImageDecodeError(f"이미지를 읽을 수 없습니다: {os.path.basename(source)}") from e

        output = ImageOps.fit(
            cropped,
            self.target_size,
            method=Image.Resampling.LANCZOS,
            centering=(0.5, 0.5),
        )
        return output, source_size, crop

    def _write(self, output: Image.Image, destination: str):
        partial = destination + PARTIAL_SUFFIX
        try:
            output.save(partial, format=OUTPUT_FORMAT, quality=self.quality, optimize=True)
            os.replace(partial, destination)
        except (OSError, ValueError) as e:
            _remove_quietly(partial)
            raise ImageWriteError(f"이미지를 저장할 수 없습니다: {os.path.basename(destination)}") from e

    def crop_and_resize(self, source: str, destination: str) -> TransformResult:
        """
        Crop `source` to the target ratio, resize it, write it to `destination`
        and remove `source`.

        On ImageDecodeError or ImageWriteError the source file is left in place
        and no destination file exists.
        """
        output, source_size, crop = self._render(source)
        self._write(output, destination)

        try:
            os.remove(source)
        except OSError as e:
            logger.warning("Processed %s but could not remove source: %s", source, e)

        logger.info(
            "Processed image %s (%dx%d, crop=%s) -> %s",
            os.path.basename(source),
            source_size[0],
            source_size[1],
            crop,
            os.path.basename(destination),
        )
        return TransformResult(
            destination=destination,
            source_size=source_size,
            crop=crop,
            output_size=output.size,
        )
