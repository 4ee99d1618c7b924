# socialnet/asgi.py
import os
from django.core.asgi import get_asgi_application

# --- Set the default settings module before the app registry loads ---
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'socialnet.settings')

# Upload views are synchronous, Django runs them in a worker thread.
application = get_asgi_application()
