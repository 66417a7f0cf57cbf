from flask import jsonify
from . import shop_api_bp

@shop_api_bp.route('/health', methods=['GET'])
def health_check():
    return jsonify({
        "status": "ok",
        "service": "shopcms"
    })
