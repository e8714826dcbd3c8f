"""
Formatting layer: role classification, place rendering and line composition.
"""

from .roles import RoleIcon, FALLBACK_ICON, classify, icon_for
from .place import Place, BOX_WIDTH, display_name, last_path_component
from .composer import MessageComposer, format_count

__all__ = [
    'RoleIcon',
    'FALLBACK_ICON',
    'classify',
    'icon_for',
    'Place',
    'BOX_WIDTH',
    'display_name',
    'last_path_component',
    'MessageComposer',
    'format_count'
]
