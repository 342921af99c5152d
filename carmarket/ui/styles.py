"""
Custom CSS styles for the marketplace app.
Tier badge and highlight rules are generated from the tier registry.
"""
import streamlit as st

from ..models.tiers import TIER_CONFIGS


# Color palette
COLORS = {
    "primary": "#007AFF",
    "primary_dark": "#0056CC",
    "secondary": "#FF6B35",
    "background": "#F8F9FA",
    "surface": "#FFFFFF",
    "text": "#1C1C1E",
    "text_muted": "#8E8E93",
    "success": "#34C759",
    "warning": "#FF9500",
    "error": "#FF3B30",
    "border": "#E5E5EA",
}


def tier_css() -> str:
    """CSS rules for every tier's badge, highlight frame and placement box."""
    rules = []
    for config in TIER_CONFIGS.values():
        cls = config.css_class
        glow = f"box-shadow: 0 6px 18px {config.glow_color};" if config.glow_color else ""
        rules.append(f"""
    .tier-badge.{cls}.badge-default, .tier-badge.{cls}.badge-compact {{
        background: {config.css_gradient};
        color: white;
    }}
    .tier-badge.{cls}.badge-detailed, .placement.{cls}, .tier-status.{cls} {{
        background: {config.bg_color};
        color: {config.text_color};
        border: 1px solid {config.border_color};
    }}
    .tier-badge.{cls}.badge-animated {{
        background: {config.css_gradient};
    }}
    .tier-highlight.{cls} {{
        border-color: {config.border_color};
        {glow}
    }}
    .upgrade-suggestion.{cls}, .tier-features.{cls} .features-title {{
        color: {config.text_color};
    }}""")
    return "\n".join(rules)


def inject_custom_css():
    """Inject custom CSS into the Streamlit app."""
    st.markdown(f"""
    <style>
    :root {{
        --primary: {COLORS['primary']};
        --primary-dark: {COLORS['primary_dark']};
        --secondary: {COLORS['secondary']};
        --bg: {COLORS['background']};
        --surface: {COLORS['surface']};
        --text: {COLORS['text']};
        --text-muted: {COLORS['text_muted']};
        --success: {COLORS['success']};
        --warning: {COLORS['warning']};
        --error: {COLORS['error']};
        --border: {COLORS['border']};
    }}

    /* Header */
    .app-header {{
        text-align: center;
        padding: 1.5rem 0 1rem;
    }}

    .app-header h1 {{
        font-size: 2.2rem;
        font-weight: 700;
        color: var(--primary);
        margin-bottom: 0.25rem;
    }}

    .app-header .subtitle {{
        color: var(--text-muted);
    }}

    /* Listing cards */
    .listing-card {{
        background: var(--surface);
        border: 1px solid var(--border);
        border-radius: 12px;
        padding: 1.25rem;
        margin-bottom: 1rem;
    }}

    .listing-card .card-header {{
        display: flex;
        justify-content: space-between;
        align-items: center;
        margin-bottom: 0.5rem;
    }}

    .listing-card .title {{
        font-size: 1.1rem;
        font-weight: 600;
        color: var(--text);
    }}

    .listing-card .price {{
        font-size: 1.2rem;
        font-weight: 700;
        color: var(--primary);
    }}

    .listing-card .location {{
        color: var(--text-muted);
        font-size: 0.9rem;
    }}

    /* Tier badges */
    .tier-badge {{
        display: inline-flex;
        align-items: center;
        gap: 0.25rem;
        font-weight: 600;
        border-radius: 20px;
        padding: 0.25rem 0.75rem;
    }}

    .tier-badge.badge-compact {{
        font-size: 0.75rem;
        padding: 0.15rem 0.5rem;
    }}

    .tier-badge.badge-detailed {{
        display: block;
        border-radius: 8px;
        padding: 0.75rem;
    }}

    .tier-badge.badge-animated .badge-inner {{
        background: rgba(255, 255, 255, 0.9);
        color: #111827;
        border-radius: 20px;
        padding: 0.15rem 0.6rem;
    }}

    .badge-pulse {{
        animation: pulse 2s ease-in-out infinite;
    }}

    @keyframes pulse {{
        0%, 100% {{ opacity: 1; }}
        50% {{ opacity: 0.7; }}
    }}

    /* Highlight frames */
    .tier-highlight {{
        position: relative;
        border-style: solid;
        border-radius: 12px;
        margin-bottom: 1rem;
    }}
    .highlight-subtle {{ border-width: 2px; }}
    .highlight-medium {{ border-width: 3px; }}
    .highlight-strong {{ border-width: 4px; }}
    .tier-highlight .listing-card {{ margin-bottom: 0; border: none; }}

    .spotlight-overlay {{
        background: linear-gradient(135deg, rgba(192, 132, 252, 0.1), rgba(236, 72, 153, 0.1));
    }}

    /* Placement and status */
    .placement, .tier-status {{
        display: flex;
        align-items: center;
        gap: 0.5rem;
        border-radius: 8px;
        padding: 0.6rem 0.9rem;
        margin: 0.5rem 0;
    }}

    .placement-label {{ font-weight: 600; }}
    .placement-description {{ font-size: 0.85rem; color: var(--text-muted); }}
    .placement-rank {{ margin-left: auto; font-weight: 700; }}
    .status-expiry {{ margin-left: 0.75rem; font-size: 0.85rem; }}

    /* Tags */
    .tag {{
        display: inline-block;
        padding: 0.25rem 0.5rem;
        border-radius: 6px;
        font-size: 0.75rem;
        font-weight: 500;
        margin-right: 0.5rem;
    }}

    .tag-instant {{
        background: rgba(52, 199, 89, 0.15);
        color: var(--success);
        border: 1px solid var(--success);
    }}

    .tag-expiring {{
        background: rgba(255, 149, 0, 0.15);
        color: var(--warning);
        border: 1px solid var(--warning);
    }}

    .upgrade-suggestion {{
        border: 1px dashed var(--border);
        border-radius: 8px;
        padding: 0.75rem;
        margin-top: 0.5rem;
    }}

    .upgrade-delta {{ font-size: 0.85rem; color: var(--text-muted); }}

    /* Hide Streamlit branding */
    #MainMenu {{visibility: hidden;}}
    footer {{visibility: hidden;}}

    {tier_css()}
    </style>
    """, unsafe_allow_html=True)
