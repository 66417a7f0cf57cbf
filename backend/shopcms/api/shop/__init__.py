from flask import Blueprint

shop_api_bp = Blueprint("shop_api", __name__)

# Import route modules so they register with shop_api_bp
from . import health
from . import orders
from . import catalog
