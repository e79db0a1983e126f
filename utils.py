import uuid

from config import CSRF_TOKEN_PREFIX


def generate_csrf_token(prefix=CSRF_TOKEN_PREFIX):
    """Generate a short random CSRF token like 'csrf-ab12cd34e'"""
    # Narrative only: nothing ever verifies this value cryptographically
    return prefix + uuid.uuid4().hex[:9]
