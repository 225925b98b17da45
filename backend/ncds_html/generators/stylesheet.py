"""Style text emitted alongside generated NCDS markup."""

from __future__ import annotations

from typing import Optional

from ncds_html import settings

_HELPER_RULES = """\
/* Custom styles for generated components */
.figma-container {
  padding: 20px;
  max-width: 1200px;
  margin: 0 auto;
}

/* Additional styles for better component display */
.ncua-modal-backdrop {
  position: fixed;
  top: 0;
  left: 0;
  right: 0;
  bottom: 0;
  background-color: rgba(0, 0, 0, 0.5);
  display: flex;
  align-items: center;
  justify-content: center;
  z-index: 1000;
}

.swiper {
  overflow: visible !important;
}

.swiper-wrapper {
  display: flex;
  gap: 8px;
}

.swiper-slide {
  width: auto;
}
"""


def build_ncds_css(cdn_base: Optional[str] = None) -> str:
    """NCDS UI Admin resource links, package import, and helper rules."""
    base = (cdn_base or settings.NCDS_CDN_BASE).rstrip("/")
    return (
        "/* NCDS UI Admin Essential Resources */\n"
        f'<link rel="stylesheet" href="{base}/main.min.css" />\n'
        f'<script type="text/javascript" src="{base}/main.min.js"></script>\n'
        "\n"
        "/* NCDS UI Admin CSS Import */\n"
        "@import '@ncds/ui-admin/dist/ui-admin/assets/styles/style.css';\n"
        "\n"
        f"{_HELPER_RULES}"
    )
