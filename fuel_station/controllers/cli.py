import click
from flask import Blueprint

from ..services.demo_service import DemoService

bp = Blueprint("station", __name__, cli_group=None)


@bp.cli.command("demo")
def demo():
    """Run the scripted fuel station demo."""
    DemoService.run(echo=click.echo)
