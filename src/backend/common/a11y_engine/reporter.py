from __future__ import annotations

import logging
from functools import partial
from typing import Any, Dict, List, Optional

from .config import A11yConfig, FilterFn
from .errors import ValidationFailure
from .host import has_hook
from .models import FailureInfo

logger = logging.getLogger(__name__)


def should_show(failure: FailureInfo, filter_fn: Optional[FilterFn]) -> bool:
    if filter_fn is not None:
        return bool(filter_fn(failure.element_name, failure.element_id))
    return True


def format_failure(failure: FailureInfo, *, include_source_reference: bool = False) -> str:
    parts = [failure.element_name, failure.message]
    if include_source_reference:
        parts.append(failure.element_id)
    return " ".join(parts)


def emit_diagnostic(args: List[Any]) -> None:
    # One %s per argument keeps the raw values on LogRecord.args for handlers.
    logger.warning(" ".join(["%s"] * len(args)), *args)


class FailureReporter:
    """Failure callback bound to one constructed element.

    Reads the engine config at report time, so mode changes apply to
    failures reported after the change (including deferred render reports).
    """

    def __init__(
        self,
        config: A11yConfig,
        element_name: str,
        element_id: str,
        *,
        owner: Any = None,
        host: Any = None,
    ):
        self._config = config
        self.element_name = element_name
        self.element_id = element_id
        self._owner = owner
        self._host = host

    def __call__(self, tag_name: str, props: Dict[str, Any], msg: str) -> None:
        self.report(
            FailureInfo(
                element_name=self.element_name,
                element_id=self.element_id,
                message=msg,
            )
        )

    def report(self, failure: FailureInfo) -> None:
        if not should_show(failure, self._config.filter_fn):
            return
        if self._config.throw_on_failure:
            raise ValidationFailure(
                format_failure(failure, include_source_reference=self._config.include_source_reference),
                failure,
            )
        self._warn(failure)

    def _warn(self, failure: FailureInfo) -> None:
        if not self._config.include_source_reference:
            emit_diagnostic([failure.element_name, failure.message])
            return

        if self._owner is not None and has_hook(self._host, "after_render"):
            # The node only exists once the owning component is in the live UI.
            self._host.after_render(self._owner, partial(self._emit_with_node, failure))
            return

        # No node can be correlated; fall back to the id, as in the fatal message.
        emit_diagnostic([failure.element_name, failure.message, failure.element_id])

    def _emit_with_node(self, failure: FailureInfo) -> None:
        args: List[Any] = [failure.element_name, failure.message]
        node = None
        if has_hook(self._host, "find_node"):
            node = self._host.find_node(failure.element_id)
        # Rendering may have produced nothing for this id.
        if node is not None:
            args.append(node)
        emit_diagnostic(args)
