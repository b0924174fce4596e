# wsgi.py
import logging
import os

from hello_service import create_app
from hello_service.service import LOG_FORMAT

logging.basicConfig(level=os.getenv('LOG_LEVEL', 'INFO').upper(), format=LOG_FORMAT)

app = create_app()

# some platforms look up wsgi:application
application = app
