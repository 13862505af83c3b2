from django import template

register = template.Library()


@register.filter
def get_item(mapping, key):
    """``{{ likeflags|get_item:project.id }}``; missing keys and mappings give 0."""
    if not mapping:
        return 0
    return mapping.get(key, 0)
