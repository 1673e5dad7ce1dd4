"""Language switch control.

One button per supported language plus an indicator element ("thumb")
that slides under the active button.
"""

from typing import Optional, Protocol

from infrastructure.i18n.models import SupportedLanguages
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from modules.site_shell.browser import FrameScheduler
from modules.site_shell.context import ShellContext
from modules.site_shell.dom import Element

logger = get_module_logger()

ACTIVE_CLASS = "active"
INDICATOR_CLASS = "thumb"
LANGUAGE_ATTRIBUTE = "data-lang"


class LanguageActivator(Protocol):
    """Anything that can switch the shell to a language."""

    async def activate_language(self, language: str) -> OperationResult: ...


class ActivateLanguageCommand:
    """Click handler of a switch button."""

    def __init__(self, activator: LanguageActivator, language: str):
        self.activator = activator
        self.language = language

    async def __call__(self) -> OperationResult:
        return await self.activator.activate_language(self.language)

    def __repr__(self) -> str:
        return f"ActivateLanguageCommand({self.language!r})"


class SwitchController:
    def __init__(
        self,
        context: ShellContext,
        activator: LanguageActivator,
        scheduler: FrameScheduler,
    ):
        self.context = context
        self.activator = activator
        self.scheduler = scheduler

    @property
    def container(self) -> Element:
        if self.context.elements is None:
            raise RuntimeError("Shell is not mounted")
        return self.context.elements.lang_switch

    def label_for(self, language: str) -> str:
        return self.context.config.switch_labels.get(language) or language.upper()

    def render_switch(self, languages: SupportedLanguages) -> None:
        """Build the indicator and one button per language. Call once per mount."""
        container = self.container
        container.clear()
        container.append(Element("div", {"class": INDICATOR_CLASS}))
        for language in languages:
            button = container.append(Element("button", {LANGUAGE_ATTRIBUTE: language}))
            button.text_content = self.label_for(language)
            button.add_event_listener(
                "click", ActivateLanguageCommand(self.activator, language)
            )
        logger.debug("switch_rendered", languages=list(languages))

    def buttons(self):
        return self.container.find_all(tag="button")

    def button_for(self, language: str) -> Optional[Element]:
        for button in self.buttons():
            if button.get_attribute(LANGUAGE_ATTRIBUTE) == language:
                return button
        return None

    def set_active(self, language: str) -> None:
        """Mark the button of ``language`` active and move the indicator to it.

        Indicator geometry waits for the next frame when the button has not
        been laid out yet.
        """
        for button in self.buttons():
            button.toggle_class(
                ACTIVE_CLASS, button.get_attribute(LANGUAGE_ATTRIBUTE) == language
            )

        target = self.button_for(language)
        if target is None:
            return
        if target.offset_width is None or target.offset_left is None:
            self.scheduler.request_frame(lambda: self._position_indicator(language))
            return
        self._position_indicator(language)

    def _position_indicator(self, language: str) -> None:
        target = self.button_for(language)
        indicator = self.container.find(class_name=INDICATOR_CLASS)
        if target is None or indicator is None:
            return
        if target.offset_width is None or target.offset_left is None:
            logger.debug("switch_layout_unavailable", language=language)
            return
        inset = self.context.config.indicator_inset
        indicator.style["width"] = f"{target.offset_width:g}px"
        indicator.style["transform"] = f"translateX({target.offset_left - inset:g}px)"
