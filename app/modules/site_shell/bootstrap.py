"""Mounts the shared page skeleton."""

from infrastructure.clients.http import FetchError, Fetcher
from infrastructure.logging import get_module_logger
from modules.site_shell.context import ShellContext, ShellElements
from modules.site_shell.dom import parse_html_fragment
from modules.site_shell.exceptions import ShellAlreadyMountedError, ShellLoadError
from modules.site_shell.switch import LanguageActivator, SwitchController

logger = get_module_logger()


class ShellBootstrap:
    """Fetches the shell template and mounts it, once per context.

    Errors are not caught: a shell that cannot be mounted stops startup.
    """

    def __init__(
        self,
        context: ShellContext,
        fetcher: Fetcher,
        switch: SwitchController,
        activator: LanguageActivator,
    ):
        self.context = context
        self.fetcher = fetcher
        self.switch = switch
        self.activator = activator
        self._started = False

    async def mount_shell(self) -> None:
        """Mount the skeleton, render the switch and dispatch any pending request.

        Raises:
            ShellAlreadyMountedError: If called more than once.
            ShellLoadError: If the template cannot be fetched or mounted.
        """
        if self._started or self.context.mounted:
            raise ShellAlreadyMountedError("mount_shell may only run once")
        self._started = True

        config = self.context.config
        url = config.template_url
        try:
            markup = await self.fetcher.fetch_text(url)
        except FetchError as e:
            logger.error("shell_fetch_failed", url=url, error=str(e))
            raise ShellLoadError(url, "template could not be fetched", e) from e

        template = parse_html_fragment(markup).get_element_by_id(config.template_id)
        if template is None or template.tag != "template":
            raise ShellLoadError(url, f"no <template id={config.template_id!r}>")

        document = self.context.document
        mount_point = document.get_element_by_id(config.mount_point_id)
        if mount_point is None:
            raise ShellLoadError(config.mount_point_id, "mount point missing")

        for child in template.clone().children:
            mount_point.append(child)

        self.context.mark_mounted(ShellElements.from_document(document))
        self.switch.render_switch(config.languages)
        self.switch.set_active(self.context.active_language)
        logger.info("shell_mounted", template=url)

        pending = self.context.take_pending()
        if pending is not None:
            logger.info("pending_activation_dispatched", language=pending)
            await self.activator.activate_language(pending)
