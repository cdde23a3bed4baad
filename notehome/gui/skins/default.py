"""
Default Skin - Dark

Quiet dark theme: pinned notes use a warm accent, recent notes a cool one.
"""
import platform

SKIN = {
    # ==========================================================================
    # PALETTE - Base colours everything derives from
    # ==========================================================================

    # Backgrounds (darkest to lightest)
    'bg_darkest': '#000000',
    'bg_dark': '#111111',
    'bg_base': '#161616',
    'bg_mid': '#1c1c1c',
    'bg_light': '#262626',
    'bg_highlight': '#303030',

    # Borders
    'border_dark': '#2a2a2a',
    'border_mid': '#3a3a3a',
    'border_light': '#4a4a4a',

    # Text (dimmest to brightest)
    'text_dim': '#666666',
    'text_mid': '#a0a0a0',
    'text_bright': '#dcdcdc',

    # ==========================================================================
    # ACCENTS - Section colours
    # ==========================================================================

    'accent_pinned': '#ffb347',
    'accent_pinned_dim': '#a0702a',
    'accent_recent': '#66ccff',
    'accent_recent_dim': '#3a7fa0',
    'accent_search': '#b0e57c',

    # ==========================================================================
    # STATES - Interactive element states
    # ==========================================================================

    # Enabled/Active (green)
    'state_enabled_bg': '#0f2a1a',
    'state_enabled_text': '#7ee0a0',
    'state_enabled_hover': '#143822',

    # Disabled/Off
    'state_disabled_bg': '#1c1c1c',
    'state_disabled_text': '#555555',

    # Selected (blue)
    'state_selected_bg': '#102035',
    'state_selected_text': '#99bbff',

    # Warning (red)
    'state_warning_bg': '#2a0f0f',
    'state_warning_text': '#ff7777',
    'state_warning_hover': '#3a1818',

    # ==========================================================================
    # FONTS
    # ==========================================================================

    'font_family': 'Helvetica',
    'font_mono': 'Menlo' if platform.system() == 'Darwin' else 'Consolas',

    'font_size_title': 16,
    'font_size_section': 12,
    'font_size_label': 11,
    'font_size_small': 10,
}
