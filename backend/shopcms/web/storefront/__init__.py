from flask import Blueprint

storefront_bp = Blueprint("storefront", __name__)

# Import route modules so they register with storefront_bp
from . import home
from . import products
from . import cart
from . import checkout
from . import content
from . import meetings
from . import uploads
