from django.conf import settings
from django.http import FileResponse, Http404, JsonResponse
from django.db import connections
from django.db.utils import OperationalError
from django.views.static import serve
import time
from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')


def _db_check(alias='default'):
    started = time.time()
    try:
        conn = connections[alias]
        conn.cursor().execute('SELECT 1')
        latency = round((time.time() - started) * 1000, 2)
        logger.debug('Database health check succeeded', alias=alias, latency_ms=latency)
        return {'status': 'ok', 'latency_ms': latency}
    except OperationalError as e:
        # Expected operational DB issues (locked file, connection refused, etc.)
        logger.warning('Database health check encountered operational error', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    except Exception as e:  # mocked failures, driver bugs
        logger.error('Database health check failed unexpectedly', alias=alias, error=str(e), exception=e.__class__.__name__)
        return {'status': 'fail', 'error': str(e), 'exception': e.__class__.__name__}


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: verifies the relational store answers."""
    checks = {'database': _db_check()}
    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    http_status = 200 if not failing else 503
    payload = {
        'status': overall_status,
        'checks': checks,
    }
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse(payload, status=http_status)


def _not_found(path):
    return JsonResponse(
        {'error': 'Resource not found', 'code': 'NOT_FOUND', 'details': {'path': path}},
        status=404,
    )


def index(request):
    """Serve the front-end entry page."""
    page = settings.PUBLIC_DIR / 'index.html'
    if not page.is_file():
        logger.warning('Front-end entry page missing', path=str(page))
        return _not_found('/')
    return FileResponse(open(page, 'rb'), content_type='text/html; charset=utf-8')


def public_file(request, path):
    """Serve a file from the public directory."""
    try:
        return serve(request, path, document_root=str(settings.PUBLIC_DIR))
    except Http404:
        logger.debug('Public file not found', path=path)
        return _not_found(f'/{path}')


def api_not_found(request, path=None):
    """Fallback for unknown API routes so they answer with the error envelope."""
    logger.debug('Unknown API route', path=request.path)
    return _not_found(request.path)
