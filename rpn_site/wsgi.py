"""
WSGI config for the RPN converter service.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "rpn_site.settings")

application = get_wsgi_application()
