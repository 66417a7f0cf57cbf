from flask import send_from_directory

from shopcms.utils.media import upload_root
from . import storefront_bp


@storefront_bp.route("/uploads/<path:filename>", methods=["GET"])
def uploads(filename):
    return send_from_directory(upload_root(), filename)
