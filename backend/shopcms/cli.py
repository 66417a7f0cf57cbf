import click

from shopcms.extensions import db
from shopcms.models.user import User
from shopcms.utils.transaction import transactional


def register_commands(app):
    @app.cli.command("create-admin")
    @click.option("--email", required=True)
    @click.option("--name", default="Admin")
    @click.password_option()
    def create_admin(email, name, password):
        """Create an admin account, or promote and reset an existing one."""
        user = User.query.filter_by(email=email).first()
        created = user is None

        with transactional():
            if created:
                user = User(email=email, name=name)
                db.session.add(user)
            user.role = "admin"
            user.is_active = True
            user.set_password(password)

        click.echo(f"{'Created' if created else 'Updated'} admin {email}")
