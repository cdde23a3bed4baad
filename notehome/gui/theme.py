"""
Theme - Centralized color and style definitions
All UI components reference this for consistent styling

Loads from active skin in notehome/gui/skins/
"""
from .skins import active as skin

# =============================================================================
# SKIN ACCESS
# =============================================================================

def get(key, default='#ff00ff'):
    """Get value from active skin. Magenta = missing key."""
    return skin.SKIN.get(key, default)


FONT_FAMILY = get('font_family')
MONO_FONT = get('font_mono')

FONT_SIZES = {
    'title': get('font_size_title'),
    'section': get('font_size_section'),
    'label': get('font_size_label'),
    'small': get('font_size_small'),
}

COLORS = {
    # States
    'enabled': get('state_enabled_bg'),
    'enabled_text': get('state_enabled_text'),
    'enabled_hover': get('state_enabled_hover'),
    'disabled': get('state_disabled_bg'),
    'disabled_text': get('state_disabled_text'),
    'inactive': get('bg_dark'),
    'inactive_text': get('text_dim'),
    'selected': get('state_selected_bg'),
    'selected_text': get('state_selected_text'),
    'warning': get('state_warning_bg'),
    'warning_text': get('state_warning_text'),
    'warning_hover': get('state_warning_hover'),

    # UI elements
    'background': get('bg_mid'),
    'background_dark': get('bg_dark'),
    'background_light': get('bg_light'),
    'background_highlight': get('bg_highlight'),
    'border': get('border_dark'),
    'border_light': get('border_light'),
    'text': get('text_mid'),
    'text_bright': get('text_bright'),
    'text_dim': get('text_dim'),

    # Sections
    'accent_pinned': get('accent_pinned'),
    'accent_pinned_dim': get('accent_pinned_dim'),
    'accent_recent': get('accent_recent'),
    'accent_recent_dim': get('accent_recent_dim'),
    'accent_search': get('accent_search'),
}


# =============================================================================
# STYLE FUNCTIONS
# =============================================================================

def button_style(state='disabled'):
    """Get button stylesheet for state: enabled, disabled, warning."""
    if state == 'enabled':
        return f"""
            QPushButton {{
                background-color: {COLORS['enabled']};
                color: {COLORS['enabled_text']};
                border-radius: 3px;
                padding: 4px 10px;
            }}
            QPushButton:hover {{
                background-color: {COLORS['enabled_hover']};
            }}
        """
    elif state == 'warning':
        return f"""
            QPushButton {{
                background-color: {COLORS['warning']};
                color: {COLORS['warning_text']};
                border-radius: 3px;
                padding: 4px 10px;
            }}
            QPushButton:hover {{
                background-color: {COLORS['warning_hover']};
            }}
        """
    else:
        return f"""
            QPushButton {{
                background-color: {COLORS['disabled']};
                color: {COLORS['disabled_text']};
                border-radius: 3px;
                padding: 4px 10px;
            }}
            QPushButton:disabled {{
                background-color: {COLORS['inactive']};
                color: {COLORS['inactive_text']};
            }}
        """


def list_style(accent_key='accent_recent'):
    """Note list style. Hover/selection tinted with the section accent."""
    return f"""
        QListWidget {{
            background: {COLORS['background_dark']};
            color: {COLORS['text']};
            border: 1px solid {COLORS['border']};
            border-radius: 3px;
        }}
        QListWidget::item {{
            padding: 4px;
        }}
        QListWidget::item:selected {{
            background: {COLORS['selected']};
            color: {COLORS['selected_text']};
        }}
        QListWidget::item:hover {{
            background: {COLORS['background_highlight']};
            color: {COLORS[accent_key]};
        }}
    """


def line_edit_style():
    return f"""
        QLineEdit {{
            background: {COLORS['background_dark']};
            color: {COLORS['text_bright']};
            border: 1px solid {COLORS['border']};
            border-radius: 3px;
            padding: 6px;
        }}
        QLineEdit:focus {{
            border-color: {COLORS['border_light']};
        }}
    """


def panel_style():
    """Standard panel/pane style with border."""
    return f"""
        QFrame {{
            background-color: {COLORS['background']};
            border: 1px solid {COLORS['border']};
            border-radius: 4px;
        }}
        QLabel {{
            border: none;
            background: transparent;
        }}
    """
