import logging
import time

logger = logging.getLogger('django')

# Rutas que no se registran en el log de peticiones
IGNORED_PATHS = (
    '/static/',
    '/favicon.ico',
    'jsi18n',
)


class RequestLogMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        start_time = time.monotonic()
        response = self.get_response(request)
        duration = time.monotonic() - start_time

        if any(term in request.path for term in IGNORED_PATHS):
            return response

        user = getattr(request, 'user', None)
        user_id = user.username if user and user.is_authenticated else 'Anónimo'
        log_msg = f"[{request.method}] {request.path} | Usuario: {user_id} | Status: {response.status_code} | {duration:.2f}s"

        if response.status_code >= 500:
            logger.error(f"❌ {log_msg}")
        elif response.status_code >= 400:
            logger.warning(f"⚠️ {log_msg}")
        else:
            logger.info(f"ℹ️ {log_msg}")

        return response
