from flask import Blueprint

admin_bp = Blueprint("admin", __name__)

# Import route modules so they register with admin_bp
from . import auth
from . import dashboard
from . import categories
from . import products
from . import orders
from . import contact_messages
from . import content_pages
from . import pages
from . import features
from . import trusted_companies
from . import meetings
from . import audit
