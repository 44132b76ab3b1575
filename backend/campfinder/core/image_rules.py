"""Image Rules: upload validation and object-path derivation for listing photos.

Invariants:
    - Only ImageContentType values are accepted; size limit is inclusive
    - Object paths are "{campsite_id}/{timestamp_ms}.{ext}"; unique per upload
    - object_path_from_url() is the inverse of the public URL for the same bucket
"""

from urllib.parse import unquote, urlparse

from campfinder.core.domain_types import ImageContentType
from campfinder.core.errors import CampsiteValidationError

ALLOWED_CONTENT_TYPES = frozenset(t.value for t in ImageContentType)

_EXTENSION_BY_TYPE = {
    ImageContentType.JPEG.value: "jpg",
    ImageContentType.PNG.value: "png",
    ImageContentType.WEBP.value: "webp",
    ImageContentType.GIF.value: "gif",
}


def validate_image(content_type: str | None, size: int, max_bytes: int) -> None:
    """Raise CampsiteValidationError for oversize or unsupported files."""
    if size > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise CampsiteValidationError(
            f"ファイルサイズは{limit_mb}MB以下にしてください", field="file",
        )
    if content_type not in ALLOWED_CONTENT_TYPES:
        raise CampsiteValidationError(
            "JPG、PNG、WebP、GIF形式の画像ファイルのみアップロード可能です",
            field="file",
        )


def file_extension(filename: str | None, content_type: str) -> str:
    """Extension from the original filename, else from the MIME type."""
    if filename and "." in filename:
        ext = filename.rsplit(".", 1)[-1].lower()
        if ext.isalnum():
            return ext
    return _EXTENSION_BY_TYPE.get(content_type, "bin")


def build_object_path(campsite_id: str, extension: str, timestamp_ms: int) -> str:
    return f"{campsite_id}/{timestamp_ms}.{extension}"


def object_path_from_url(image_url: str, bucket: str) -> str:
    """Path inside bucket for a public URL ("…/public/<bucket>/<id>/<ts>.jpg")."""
    segments = unquote(urlparse(image_url).path).split("/")
    if bucket not in segments:
        raise CampsiteValidationError("Invalid image URL", field="url")
    path = "/".join(segments[segments.index(bucket) + 1:])
    if not path:
        raise CampsiteValidationError("Invalid image URL", field="url")
    return path
