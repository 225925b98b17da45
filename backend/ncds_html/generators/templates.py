"""NCDS UI Admin widget templates.

One template per supported component kind, registered in TEMPLATE_REGISTRY
under the same ComponentKind values the validator accepts. Each template
takes a TemplateContext and returns an HTML fragment mirroring the DOM
structure of the corresponding @ncds/ui-admin React component.

Props missing from the mapping fall back to per-widget defaults. Text and
attribute values are escaped; ``children_html`` is already-rendered markup
and is interpolated as-is.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from html import escape
from typing import Any, Callable, Dict, List

from ncds_html.models import ComponentKind, ComponentMapping, DesignNode


@dataclass(frozen=True)
class TemplateContext:
    """Everything a widget template may read."""
    element_id: str
    class_name: str
    props: Dict[str, Any]
    children_html: str
    node: DesignNode


TemplateFn = Callable[[TemplateContext], str]


def _id_attr(element_id: str) -> str:
    return f' id="{escape(element_id)}"' if element_id else ""


def _flag(enabled: Any, attr: str) -> str:
    return f" {attr}" if enabled else ""


def _text(value: Any) -> str:
    return escape(str(value)) if value is not None else ""


def clamp_progress(value: Any) -> float:
    """Clamp a progress value into [0, 100]; non-numeric input counts as 0."""
    try:
        number = float(value or 0)
    except (TypeError, ValueError):
        number = 0.0
    if math.isnan(number):
        number = 0.0
    clamped = min(max(number, 0.0), 100.0)
    return int(clamped) if clamped.is_integer() else clamped


# =====================================================================
# Form controls
# =====================================================================


def render_button(ctx: TemplateContext) -> str:
    props = ctx.props
    btn_type = props.get("type") or "button"
    size = props.get("size") or "xs"
    hierarchy = props.get("hierarchy") or "primary"
    button_class = f"ncua-btn ncua-btn--{hierarchy} ncua-btn--{size}"

    if props.get("label"):
        content = _text(props["label"])
    else:
        content = ctx.children_html or _text(ctx.node.text) or "Button"
    content = f'<span class="ncua-btn__label">{content}</span>'

    if props.get("leading_icon"):
        content = f'<i class="ncua-icon">{_text(props["leading_icon"])}</i>{content}'
    if props.get("trailing_icon"):
        content = f'{content}<i class="ncua-icon">{_text(props["trailing_icon"])}</i>'

    return (
        f'<button{_id_attr(ctx.element_id)} class="{button_class}" type="{escape(btn_type)}"'
        f'{_flag(props.get("disabled"), "disabled")}>{content}</button>'
    )


def render_input(ctx: TemplateContext) -> str:
    props = ctx.props
    input_type = props.get("type") or "text"
    size = props.get("size") or "xs"
    placeholder = props.get("placeholder") or "텍스트를 입력하세요"
    value = f' value="{escape(str(props["value"]))}"' if props.get("value") else ""
    return f"""
<div class="ncua-input ncua-input--{size}">
  <div class="ncua-input__content">
    <div class="ncua-input__field ncua-input__field--{size}">
      <input{_id_attr(ctx.element_id)} placeholder="{escape(placeholder)}" type="{escape(input_type)}"{value}{_flag(props.get("required"), "required")}{_flag(props.get("disabled"), "disabled")} />
    </div>
  </div>
</div>"""


def _render_choice(ctx: TemplateContext, kind: str, default_label: str, extra_attrs: str = "") -> str:
    """Shared checkbox/radio structure: label > input wrapper + text."""
    props = ctx.props
    size = props.get("size") or "xs"
    disabled = props.get("disabled")
    label = props.get("label") or ctx.node.text or default_label
    input_type = "checkbox" if kind == "checkbox" else "radio"
    return f"""
<label class="ncua-{kind}-field ncua-{kind}-field--{size} has-text">
  <span class="ncua-{kind}-input ncua-{kind}-input--{size}{' is-disabled' if disabled else ''}">
    <input{_id_attr(ctx.element_id)} class="ncua-{kind}-field__input" type="{input_type}"{extra_attrs}{_flag(props.get("checked"), "checked")}{_flag(disabled, "disabled")} />
    <span class="ncua-{kind}-input__ico"></span>
  </span>
  <span><span class="ncua-{kind}-field__text">{_text(label)}</span></span>
</label>"""


def render_checkbox(ctx: TemplateContext) -> str:
    return _render_choice(ctx, "checkbox", "Checkbox")


def render_radio(ctx: TemplateContext) -> str:
    group = ctx.props.get("name") or "radio-group"
    return _render_choice(ctx, "radio", "Radio", f' name="{escape(group)}"')


def render_select(ctx: TemplateContext) -> str:
    props = ctx.props
    size = props.get("size") or "md"
    placeholder = props.get("placeholder") or "Select an option"
    destructive = " destructive" if props.get("destructive") else ""

    options = [f'<option value="" selected>{_text(placeholder)}</option>']
    # Options come from text-bearing children; value is the child's position
    for index, child in enumerate(ctx.node.children or [], 1):
        if child.text:
            options.append(f'<option value="{index}">{_text(child.text)}</option>')

    return f"""
<span class="ncua-select{destructive}">
  <span class="ncua-select__content ncua-select--{size}">
    <select{_id_attr(ctx.element_id)} class="ncua-select__tag"{_flag(props.get("disabled"), "disabled")}{_flag(props.get("required"), "required")}>
      {''.join(options)}
    </select>
  </span>
</span>"""


def render_toggle(ctx: TemplateContext) -> str:
    props = ctx.props
    size = props.get("size") or "md"
    disabled = props.get("disabled")
    text = props.get("text") or ctx.node.text or ""
    text_html = f'<span class="ncua-toggle__text">{_text(text)}</span>' if text else ""
    return f"""
<label class="ncua-toggle ncua-toggle--{size}{' is-disabled' if disabled else ''}">
  <input{_id_attr(ctx.element_id)} class="ncua-toggle__input" type="checkbox"{_flag(props.get("checked"), "checked")}{_flag(disabled, "disabled")} />
  <span class="ncua-toggle__switch"></span>
  {text_html}
</label>"""


def render_slider(ctx: TemplateContext) -> str:
    props = ctx.props
    value = props.get("value") or 50
    min_value = props.get("min") or 0
    max_value = props.get("max") or 100
    size = props.get("size") or "md"
    return f"""
<div{_id_attr(ctx.element_id)} class="ncua-slider ncua-slider--{size}">
  <input class="ncua-slider__input" type="range" min="{min_value}" max="{max_value}" value="{value}" />
</div>"""


# =====================================================================
# Labels & status
# =====================================================================


def render_badge(ctx: TemplateContext) -> str:
    props = ctx.props
    label = props.get("label") or ctx.node.text or "Badge"
    badge_type = props.get("type") or "filled"
    color = props.get("color") or "gray"
    size = props.get("size") or "md"
    return f"""
<span{_id_attr(ctx.element_id)} class="ncua-badge ncua-badge--{badge_type} ncua-badge--{color} ncua-badge--{size}">
  <span class="ncua-badge__label">{_text(label)}</span>
</span>"""


def render_tag(ctx: TemplateContext) -> str:
    props = ctx.props
    label = props.get("label") or ctx.node.text or "Tag"
    color = props.get("color") or "gray"
    size = props.get("size") or "md"
    remove = '<button class="ncua-tag__remove" type="button">&times;</button>' if props.get("removable") else ""
    return f"""
<span{_id_attr(ctx.element_id)} class="ncua-tag ncua-tag--{color} ncua-tag--{size}">
  <span class="ncua-tag__label">{_text(label)}</span>
  {remove}
</span>"""


def render_notification(ctx: TemplateContext) -> str:
    props = ctx.props
    title = props.get("title") or "Notification"
    description = props.get("description") or ctx.node.text or ""
    color = props.get("color") or props.get("type") or "neutral"
    description_html = (
        f'<span class="ncua-floating-notification__supporting-text">{_text(description)}</span>'
        if description else ""
    )
    return f"""
<div{_id_attr(ctx.element_id)} class="ncua-floating-notification ncua-floating-notification--{color}" role="alert">
  <div class="ncua-floating-notification__content">
    <div class="ncua-floating-notification__container">
      <div class="ncua-floating-notification__text-container">
        <div class="ncua-floating-notification__title-wrapper">
          <span class="ncua-floating-notification__title">{_text(title)}</span>
        </div>
        {description_html}
      </div>
    </div>
  </div>
  <button class="ncua-floating-notification__close-button" type="button">&times;</button>
</div>"""


def render_progress_bar(ctx: TemplateContext) -> str:
    props = ctx.props
    progress = clamp_progress(props.get("progress"))
    label = props.get("label") or "none"
    show_value = props.get("show_value", False)
    right = (
        f'<span class="ncua-progress-bar__label ncua-progress-bar__label-right">{progress}%</span>'
        if show_value and label == "right" else ""
    )
    bottom = (
        f'<span class="ncua-progress-bar__label ncua-progress-bar__label-bottom">{progress}%</span>'
        if show_value and label == "bottom" else ""
    )
    return f"""
<div{_id_attr(ctx.element_id)} class="ncua-progress-bar ncua-progress-bar-{label}">
  <div class="ncua-progress-bar__content">
    <div class="ncua-progress-bar__bar">
      <div class="ncua-progress-bar__fill" style="width: {progress}%" aria-valuenow="{progress}" aria-valuemin="0" aria-valuemax="100"></div>
    </div>
    {right}
  </div>
  {bottom}
</div>"""


def render_progress_circle(ctx: TemplateContext) -> str:
    props = ctx.props
    progress = clamp_progress(props.get("progress"))
    size = props.get("size") or "md"
    stroke_width = props.get("stroke_width") or 4
    radius = 50 - stroke_width
    circumference = 2 * math.pi * radius
    offset = circumference - (progress / 100) * circumference
    return f"""
<div{_id_attr(ctx.element_id)} class="ncua-progress-circle ncua-progress-circle--{size}">
  <svg class="ncua-progress-circle__svg" viewBox="0 0 100 100">
    <circle class="ncua-progress-circle__bg" cx="50" cy="50" r="{radius}" stroke-width="{stroke_width}"></circle>
    <circle class="ncua-progress-circle__progress" cx="50" cy="50" r="{radius}" stroke-width="{stroke_width}"
            style="stroke-dasharray: {circumference:.4f}; stroke-dashoffset: {offset:.4f};"></circle>
  </svg>
  <div class="ncua-progress-circle__text">{progress}%</div>
</div>"""


def render_spinner(ctx: TemplateContext) -> str:
    props = ctx.props
    size = props.get("size") or "md"
    text = props.get("text") or ctx.node.text or ""
    text_html = f'<p class="ncua-spinner__text">{_text(text)}</p>' if text else ""
    spinner = f"""
<div{_id_attr(ctx.element_id)} class="ncua-spinner ncua-spinner--{size}">
  <div class="ncua-spinner__icon"></div>
  {text_html}
</div>"""
    if props.get("backdrop"):
        return f"""
<div class="ncua-spinner-backdrop">
  {spinner}
</div>"""
    return spinner


def render_divider(ctx: TemplateContext) -> str:
    orientation = ctx.props.get("orientation") or "horizontal"
    text = ctx.props.get("text") or ctx.node.text or ""
    if text:
        return f"""
<div{_id_attr(ctx.element_id)} class="ncua-divider ncua-divider--{orientation} ncua-divider--text">
  <span class="ncua-divider__text">{_text(text)}</span>
</div>"""
    return f'<hr{_id_attr(ctx.element_id)} class="ncua-divider ncua-divider--{orientation}" />'


def render_featured_icon(ctx: TemplateContext) -> str:
    props = ctx.props
    size = props.get("size") or "md"
    color = props.get("color") or "primary"
    theme = props.get("theme") or "light"
    return f"""
<div{_id_attr(ctx.element_id)} class="ncua-featured-icon ncua-featured-icon--{size} ncua-featured-icon--{color}-{theme}">
  <svg viewBox="0 0 24 24">
    <path d="M12 2l3.09 6.26L22 9.27l-5 4.87 1.18 6.88L12 17.77l-6.18 3.25L7 14.14 2 9.27l6.91-1.01L12 2z" fill="currentColor"/>
  </svg>
</div>"""


# =====================================================================
# Containers (interpolate rendered children)
# =====================================================================


def render_modal(ctx: TemplateContext) -> str:
    props = ctx.props
    title = props.get("title") or "Modal Title"
    subtitle = props.get("subtitle") or ""
    size = props.get("size") or "md"
    content = ctx.children_html or _text(ctx.node.text) or "Modal content"
    subtitle_html = f'<div class="ncua-modal__title-subtitle">{_text(subtitle)}</div>' if subtitle else ""
    return f"""
<div{_id_attr(ctx.element_id)} class="ncua-modal-backdrop">
  <div class="ncua-modal ncua-modal--{size}">
    <div class="ncua-modal__header ncua-modal__header--left ncua-modal__header--close-button">
      <div class="ncua-modal__title">
        <div class="ncua-modal__title-text">{_text(title)}</div>
        {subtitle_html}
      </div>
      <button class="ncua-modal__close-button" type="button">&times;</button>
    </div>
    <div class="ncua-modal__header-divider"></div>
    <div class="ncua-modal__content">
      {content}
    </div>
    <div class="ncua-modal__actions-divider"></div>
    <div class="ncua-modal__actions-wrapper">
      <div class="ncua-modal__actions ncua-modal__actions--horizontal ncua-modal__actions--right">
        <button class="ncua-btn ncua-btn--secondary-gray ncua-btn--sm" type="button">
          <span class="ncua-btn__label">취소</span>
        </button>
        <button class="ncua-btn ncua-btn--primary ncua-btn--sm" type="button">
          <span class="ncua-btn__label">확인</span>
        </button>
      </div>
    </div>
  </div>
</div>"""


def render_tooltip(ctx: TemplateContext) -> str:
    props = ctx.props
    title = props.get("title") or "Tooltip"
    position = props.get("position") or "top"
    tooltip_type = props.get("tooltip_type") or "dark"
    if props.get("content"):
        content = _text(props["content"])
    else:
        content = ctx.children_html or _text(ctx.node.text)
    title_html = f'<span class="ncua-tooltip__title">{_text(title)}</span>' if title else ""
    content_html = f'<span class="ncua-tooltip__content">{content}</span>' if content else ""
    return f"""
<span{_id_attr(ctx.element_id)} class="ncua-tooltip ncua-tooltip--{position}">
  <span class="ncua-tooltip__trigger">?</span>
  <span class="ncua-tooltip__bg ncua-tooltip__bg--{tooltip_type} ncua-tooltip__bg--{position}">
    {title_html}
    {content_html}
  </span>
</span>"""


def render_empty_state(ctx: TemplateContext) -> str:
    props = ctx.props
    title = props.get("title") or "Empty State"
    if props.get("description"):
        description = _text(props["description"])
    else:
        description = ctx.children_html or _text(ctx.node.text)
    description_html = f'<p class="ncua-empty-state__description">{description}</p>' if description else ""
    return f"""
<div{_id_attr(ctx.element_id)} class="ncua-empty-state">
  <div class="ncua-empty-state__icon">
    <svg class="ncua-featured-icon ncua-featured-icon--xl ncua-featured-icon--gray-modern" viewBox="0 0 24 24">
      <path d="M3 3h18v18H3V3z" stroke="currentColor" fill="none"/>
    </svg>
  </div>
  <div class="ncua-empty-state__content">
    <h3 class="ncua-empty-state__title">{_text(title)}</h3>
    {description_html}
  </div>
</div>"""


# =====================================================================
# Item lists (one sub-fragment per item, in order)
# =====================================================================

_DEFAULT_TABS: List[Dict[str, Any]] = [
    {"label": "탭 1", "is_active": True},
    {"label": "탭 2", "is_active": False},
]


def render_horizontal_tab(ctx: TemplateContext) -> str:
    props = ctx.props
    tabs = props.get("tabs") or _DEFAULT_TABS
    tab_type = props.get("type") or "button-primary"
    size = props.get("size") or "sm"
    full_width = " ncua-horizontal-tab--fullWidth" if props.get("full_width") else ""
    buttons = "".join(
        f"""
        <div class="swiper-slide">
          <button class="ncua-tab-button ncua-tab-button--{tab_type} ncua-tab-button--{size}{' is-active' if tab.get('is_active') else ''}" data-tab="{index}">
            <span class="ncua-tab-button__label">{_text(tab.get('label'))}</span>
          </button>
        </div>"""
        for index, tab in enumerate(tabs)
    )
    return f"""
<div{_id_attr(ctx.element_id)} class="ncua-horizontal-tab ncua-horizontal-tab--{tab_type}{full_width}">
  <div class="swiper" style="overflow: visible;">
    <div class="swiper-wrapper">
      {buttons}
    </div>
  </div>
</div>"""


def render_vertical_tab(ctx: TemplateContext) -> str:
    props = ctx.props
    tabs = props.get("tabs") or _DEFAULT_TABS
    tab_type = props.get("type") or "button-primary"
    buttons = "".join(
        f"""
        <button class="ncua-tab-button ncua-tab-button--{tab_type} ncua-tab-button--sm{' is-active' if tab.get('is_active') else ''}" data-tab="{escape(str(tab.get('id') or f'tab{index}'))}">
          <span class="ncua-tab-button__label">{_text(tab.get('label'))}</span>
        </button>"""
        for index, tab in enumerate(tabs, 1)
    )
    return f"""
<div{_id_attr(ctx.element_id)} class="ncua-vertical-tab ncua-vertical-tab--{tab_type}">
  <div class="ncua-vertical-tab__list">
    {buttons}
  </div>
</div>"""


def _nav_button(kind: str, label: str, disabled: bool) -> str:
    return f"""
    <button class="ncua-pagination__nav-btn ncua-pagination__nav-btn--{kind}"{_flag(disabled, "disabled")}>
      <span class="ncua-pagination__nav-btn-text">{label}</span>
    </button>"""


def render_pagination(ctx: TemplateContext) -> str:
    props = ctx.props
    current = props.get("current_page") or 1
    total = props.get("total_pages") or 10
    break_point = props.get("break_point") or "pc"
    show_jump = total > 5

    # Window of up to five pages starting two before the current one
    start = max(1, current - 2)
    end = min(total, start + 4)
    pages = "".join(
        f"""
        <li class="ncua-pagination__item">
          <button class="ncua-pagination__page-num{' is-current' if page == current else ''}">{page}</button>
        </li>"""
        for page in range(start, end + 1)
    )

    leading = trailing = ""
    if show_jump:
        leading = _nav_button("first", "처음", current == 1) + _nav_button("prev", "이전", current == 1)
        trailing = _nav_button("next", "다음", current == total) + _nav_button("last", "마지막", current == total)

    return f"""
<nav{_id_attr(ctx.element_id)} class="ncua-pagination ncua-pagination--{break_point}">
  {leading}
  <ul class="ncua-pagination__list">
    {pages}
  </ul>
  <p class="ncua-pagination__page-info">
    <em class="ncua-pagination__current-num">{current}</em> / {total}
  </p>
  {trailing}
</nav>"""


def render_breadcrumb(ctx: TemplateContext) -> str:
    items = ctx.props.get("items") or [
        {"label": "Home", "href": "/"},
        {"label": "Page", "href": "/page"},
    ]
    last = len(items) - 1
    entries = []
    for index, item in enumerate(items):
        if index == last:
            inner = f'<span class="ncua-breadcrumb__current">{_text(item.get("label"))}</span>'
        else:
            href = escape(str(item.get("href") or "#"))
            inner = f'<a class="ncua-breadcrumb__link" href="{href}">{_text(item.get("label"))}</a>'
        entries.append(f"""
        <li class="ncua-breadcrumb__item">
          {inner}
        </li>""")
    return f"""
<nav{_id_attr(ctx.element_id)} class="ncua-breadcrumb">
  <ol class="ncua-breadcrumb__list">
    {''.join(entries)}
  </ol>
</nav>"""


def render_dropdown(ctx: TemplateContext) -> str:
    props = ctx.props
    label = props.get("label") or "Dropdown"
    items = props.get("items") or [
        {"label": "옵션 1", "value": "1"},
        {"label": "옵션 2", "value": "2"},
    ]
    entries = "".join(
        f"""<li class="ncua-dropdown__item">
        <button class="ncua-dropdown__button" type="button" data-value="{escape(str(item.get('value', '')))}">{_text(item.get('label'))}</button>
      </li>"""
        for item in items
    )
    return f"""
<div{_id_attr(ctx.element_id)} class="ncua-dropdown">
  <button class="ncua-dropdown__trigger" type="button">{_text(label)}</button>
  <ul class="ncua-dropdown__menu">
    {entries}
  </ul>
  {ctx.children_html}
</div>"""


# =====================================================================
# Fallback + registry
# =====================================================================


def render_generic_component(mapping: ComponentMapping, ctx: TemplateContext) -> str:
    """Declared tag + computed class for a validated kind without a template."""
    tag = mapping.html_tag or "div"
    return f'<{tag}{_id_attr(ctx.element_id)} class="{ctx.class_name}">{ctx.children_html}</{tag}>'


TEMPLATE_REGISTRY: Dict[str, TemplateFn] = {
    ComponentKind.BUTTON.value: render_button,
    ComponentKind.INPUT_BASE.value: render_input,
    ComponentKind.CHECKBOX.value: render_checkbox,
    ComponentKind.RADIO.value: render_radio,
    ComponentKind.SELECT.value: render_select,
    ComponentKind.BADGE.value: render_badge,
    ComponentKind.MODAL.value: render_modal,
    ComponentKind.HORIZONTAL_TAB.value: render_horizontal_tab,
    ComponentKind.VERTICAL_TAB.value: render_vertical_tab,
    ComponentKind.PAGINATION.value: render_pagination,
    ComponentKind.PROGRESS_BAR.value: render_progress_bar,
    ComponentKind.PROGRESS_CIRCLE.value: render_progress_circle,
    ComponentKind.NOTIFICATION.value: render_notification,
    ComponentKind.SPINNER.value: render_spinner,
    ComponentKind.TAG.value: render_tag,
    ComponentKind.TOOLTIP.value: render_tooltip,
    ComponentKind.SLIDER.value: render_slider,
    ComponentKind.TOGGLE.value: render_toggle,
    ComponentKind.BREADCRUMB.value: render_breadcrumb,
    ComponentKind.DIVIDER.value: render_divider,
    ComponentKind.DROPDOWN.value: render_dropdown,
    ComponentKind.EMPTY_STATE.value: render_empty_state,
    ComponentKind.FEATURED_ICON.value: render_featured_icon,
}
