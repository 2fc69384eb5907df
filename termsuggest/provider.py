"""Terminal completion provider: one request, from command line to candidates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .availability import get_commands_in_path, init_builtin_commands
from .logging_setup import get_logger
from .prefix import extract_prefix
from .resolver import resolve
from .specs import SpecRegistry, default_spec_roots

if TYPE_CHECKING:
    import asyncio

    from .config import Configuration
    from .models import CompletionCandidate

__all__ = ["SuggestProvider"]


class SuggestProvider:
    """Provide completions for a command line, using the spec registry.

    Expected failures (unreadable directories, broken spec modules) only
    reduce the number of suggestions, they are never raised.
    """

    def __init__(
        self,
        config: Configuration,
        registry: SpecRegistry | None = None,
        path_env: str | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            config: The loaded configuration
            registry: Spec registry, built from the configuration if not given
            path_env: Search path override (defaults to $PATH at request time)
        """
        self.config = config
        self.log = get_logger("provider")
        self.path_env = path_env
        self.registry = registry or SpecRegistry(
            default_spec_roots(config.get_list("spec_paths")),
            cache=config.get_bool("cache_specs", True),
        )

    async def available_commands(self) -> set[str]:
        """Return the commands available for this request.

        Shell builtins are probed on the first call, then read from the
        process-wide cache.
        """
        commands = await get_commands_in_path(self.path_env)
        if self.config.get_bool("builtins", True):
            commands.update(await init_builtin_commands() or ())
        commands.update(self.config.get_list("extra_commands"))
        return commands

    async def provide_completions(
        self,
        command_line: str,
        cursor_position: int,
        cancel: asyncio.Event | None = None,
    ) -> list[CompletionCandidate] | None:
        """Return the completions at the cursor.

        Args:
            command_line: The full command line
            cursor_position: Cursor offset in `command_line`
            cancel: Set by the caller when the request is no longer needed

        Returns:
            The candidates, or None when there is nothing to offer
        """
        if cancel is not None and cancel.is_set():
            return None

        prefix = extract_prefix(command_line, cursor_position)
        if prefix is None:
            self.log.debug("Cursor at %d is inside a word, no completion", cursor_position)
            return None

        available = await self.available_commands()
        specs = await self.registry.load(available)

        result = resolve(
            prefix,
            available,
            specs,
            command_line=command_line,
            cursor_position=cursor_position,
            dedupe=self.config.get_bool("dedupe"),
        )
        self.log.debug("Completion count for %r: %d", prefix, len(result))
        return result or None
