import os
import sys
from pathlib import Path

from dotenv import load_dotenv

sys.path.insert(0, os.path.dirname(__file__))

_env_file = os.environ.get("DJANGO_ENV_FILE") or str(Path(__file__).resolve().parent / ".env")
load_dotenv(_env_file)

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "pavexpert.settings")

from django.core.wsgi import get_wsgi_application  # noqa: E402

application = get_wsgi_application()
