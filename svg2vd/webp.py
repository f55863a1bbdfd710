from pathlib import Path

from loguru import logger
from PIL import Image, UnidentifiedImageError

from svg2vd.exceptions import ImageConversionException
from svg2vd.names import to_res_name

DEFAULT_QUALITY = 90


def image_to_webp(file_path: str | Path, quality: float = DEFAULT_QUALITY, output_dir: str | Path | None = None) -> Path:
    """Re-encode a raster image (PNG, JPEG...) as WEBP.

    The output is named after the Android resource name of the source file and written next to
    it, or into `output_dir` when given.

    Args:
        file_path (str | Path): path to the source image
        quality (float, optional): encoding quality, from 0 to 100; 100 selects lossless encoding.
        Defaults to 90.
        output_dir (str | Path | None, optional): directory for the WEBP file

    Raises:
        ImageConversionException: if the image can't be read, decoded, encoded or written

    Returns:
        Path: path of the written WEBP image
    """
    file_path = Path(file_path)
    source = str(file_path)
    if not 0 <= quality <= 100:
        raise ImageConversionException(source, f"invalid WEBP quality {quality}, must be from 0 to 100")

    output_path = Path(output_dir or file_path.parent) / f"{to_res_name(file_path.stem)}.webp"
    if output_path.exists():
        logger.warning("{}: overwriting existing {}", source, output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with Image.open(file_path) as image:
            if image.mode not in ("RGB", "RGBA"):
                image = image.convert("RGBA" if "A" in image.getbands() or "transparency" in image.info else "RGB")
            if quality >= 100:
                image.save(output_path, format="WEBP", lossless=True)
            else:
                image.save(output_path, format="WEBP", quality=int(quality))
    except FileNotFoundError as e:
        raise ImageConversionException(source, f"can't open image: {e}") from e
    except UnidentifiedImageError as e:
        raise ImageConversionException(source, "can't decode image") from e
    except OSError as e:
        raise ImageConversionException(source, f"can't convert to WEBP image {output_path}: {e}") from e

    logger.debug("{}: written {}", source, output_path)
    return output_path
