"""
run_demo.py
-----------
Run the scripted fuel station demo from a plain checkout.

Usage:
    $ python run_demo.py

The same demo is available through the Flask CLI:
    $ flask --app fuel_station demo
"""

from fuel_station import create_app
from fuel_station.services.demo_service import DemoService


def main():
    app = create_app()
    with app.app_context():
        DemoService.run()


if __name__ == "__main__":
    main()
