"""Applies a UiState to the mounted shell."""

from typing import Iterable, Optional

from modules.site_shell.context import CARDS_ID, LINKS_TITLE_ID, ShellContext
from modules.site_shell.dom import Element
from modules.site_shell.ui_state import BreadcrumbView, CardView, UiState


def set_text(element: Optional[Element], value: Optional[str]) -> None:
    """Replace an element's text, keeping it when there is no value."""
    if element is not None and value:
        element.text_content = value


class ShellRenderer:
    """Writes UI state into the document slots captured at mount time."""

    def __init__(self, context: ShellContext):
        self.context = context

    @property
    def elements(self):
        if self.context.elements is None:
            raise RuntimeError("Shell is not mounted")
        return self.context.elements

    def apply_chrome(self, state: UiState) -> None:
        """Document metadata, hero, footer and breadcrumbs."""
        document = self.context.document
        document.lang = state.language
        document.dir = state.dir
        document.title = state.title

        elements = self.elements
        set_text(elements.hero_title, state.hero_title)
        set_text(elements.hero_tagline, state.hero_tagline)
        set_text(elements.hero_lede, state.hero_lede)
        set_text(elements.footer_note, state.footer_note)
        self.render_breadcrumbs(state.breadcrumb)

    def render_breadcrumbs(self, crumb: BreadcrumbView) -> None:
        container = self.elements.breadcrumbs
        container.clear()
        item = container.append(Element("li"))
        anchor = item.append(Element("a", {"href": crumb.href}))
        anchor.text_content = crumb.label

    def inject_content(self, markup: str, state: UiState) -> None:
        """Put a content fragment in the slot, then fill its links section."""
        self.elements.content_slot.inner_html = markup
        set_text(self.context.document.get_element_by_id(LINKS_TITLE_ID), state.links_title)
        container = self.context.document.get_element_by_id(CARDS_ID)
        if container is not None:
            self.render_cards(container, state.cards)

    def clear_content(self) -> None:
        self.elements.content_slot.clear()

    def render_cards(self, container: Element, cards: Iterable[CardView]) -> None:
        separator = self.context.config.link_separator
        container.clear()
        for card in cards:
            card_element = container.append(Element("div", {"class": "card"}))
            title = card_element.append(Element("strong"))
            title.text_content = card.title
            links = card_element.append(Element("span"))
            for index, link in enumerate(card.links):
                anchor = links.append(
                    Element(
                        "a",
                        {"href": link.href, "target": link.target, "rel": link.rel},
                    )
                )
                anchor.text_content = link.label
                if index < len(card.links) - 1:
                    links.append(separator)
