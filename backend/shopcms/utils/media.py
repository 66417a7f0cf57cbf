import os
import uuid
from werkzeug.utils import secure_filename
from flask import current_app

from shopcms.utils.validation import ValidationFailed

ALLOWED_IMAGE_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "webp", "svg"}


def is_external(path) -> bool:
    return isinstance(path, str) and path.startswith(("http://", "https://"))


def allowed_file(filename):
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_IMAGE_EXTENSIONS


def upload_root():
    folder = current_app.config.get("UPLOAD_FOLDER", "uploads")
    if not os.path.isabs(folder):
        folder = os.path.join(current_app.root_path, folder)
    return folder


def _file_size(file):
    stream = file.stream
    position = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(position)
    return size


def save_image(file, *, folder, field="image", max_kb=5120):
    """
    Store an uploaded image under ``UPLOAD_FOLDER/<folder>``.

    Returns the storage path relative to the upload root, e.g.
    ``products/3f2c....jpg``.
    """
    if not allowed_file(file.filename):
        raise ValidationFailed({field: f"The {field.replace('_', ' ')} field must be an image."})

    if _file_size(file) > max_kb * 1024:
        raise ValidationFailed(
            {field: f"The {field.replace('_', ' ')} field must not be greater than {max_kb} kilobytes."}
        )

    filename = secure_filename(file.filename)
    ext = filename.rsplit(".", 1)[1].lower()
    relative_path = f"{folder}/{uuid.uuid4().hex}.{ext}"

    target_dir = os.path.join(upload_root(), folder)
    os.makedirs(target_dir, exist_ok=True)
    file.save(os.path.join(upload_root(), relative_path))

    return relative_path


def delete_file(path):
    """
    Deletes a stored upload given its relative path.
    External URLs are never touched.
    """
    if not path or is_external(path):
        return False

    file_path = os.path.join(upload_root(), path.lstrip("/"))

    if os.path.exists(file_path):
        try:
            os.remove(file_path)
            return True
        except OSError as e:
            current_app.logger.error(f"Failed to delete file {file_path}: {e}")
            return False
    return False


def media_url(path):
    """Public URL for a stored upload or an external image."""
    if not path:
        return None
    if is_external(path):
        return path
    return f"/uploads/{path.lstrip('/')}"
