from typing import Dict, List, Tuple

NO_CACHE_HEADERS = {
    'Cache-Control': 'no-store, no-cache, must-revalidate, proxy-revalidate',
    'Pragma': 'no-cache',
    'Expires': '0',
    'Surrogate-Control': 'no-store',
}


def policy_headers(powered_by: str) -> Dict[str, str]:
    headers = {
        'X-Content-Type-Options': 'nosniff',
        'X-XSS-Protection': '1; mode=block',
        'X-Powered-By': powered_by,
    }
    headers.update(NO_CACHE_HEADERS)
    return headers


class HeaderPolicyMiddleware:
    """WSGI wrapper that stamps the header policy on every response.

    It sits outside the Socket.IO middleware, so engine.io polling and
    handshake responses get the same headers as Flask routes.
    """

    def __init__(self, wsgi_app, powered_by: str):
        self.wsgi_app = wsgi_app
        self.headers = policy_headers(powered_by)
        self._names = {name.lower() for name in self.headers}

    def __call__(self, environ, start_response):
        def _start_response(status, response_headers: List[Tuple[str, str]], exc_info=None):
            kept = [(k, v) for k, v in response_headers if k.lower() not in self._names]
            kept.extend(self.headers.items())
            return start_response(status, kept, exc_info)

        return self.wsgi_app(environ, _start_response)
