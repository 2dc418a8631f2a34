from .i18n import get_language, labels


def language(request):
    """Expose the active language and its page labels to every template."""
    current = get_language(request) if hasattr(request, 'session') else 'en'
    return {
        'language': current,
        't': labels(current),
    }
