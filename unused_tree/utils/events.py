"""Event emitter for pipeline progress notifications."""

from typing import Callable, Dict, List


class SimpleEmitter:
    """Lightweight event emitter for pipeline progress.

    Lets the analysis pipeline report stage progress without knowing
    whether a spinner, a log or nothing at all is listening.

    Example:
        emitter = SimpleEmitter()
        emitter.on('stage:complete', lambda **kw: print(f"{kw['stage']} done"))
        emitter.emit('stage:complete', stage='scan')  # prints "scan done"
    """

    def __init__(self):
        self._handlers: Dict[str, List[Callable]] = {}

    def on(self, event: str, handler: Callable) -> 'SimpleEmitter':
        """Subscribe to an event.

        Args:
            event: Event name to listen for
            handler: Callable receiving the event data as keyword arguments

        Returns:
            Self for method chaining
        """
        self._handlers.setdefault(event, []).append(handler)
        return self

    def emit(self, event: str, **data) -> int:
        """Emit an event to every handler registered for it.

        Returns:
            Number of handlers called
        """
        handlers = self._handlers.get(event, [])
        for handler in handlers:
            handler(**data)
        return len(handlers)
