import typing


CallbackType = typing.Callable[..., typing.Any]


class EventEmitter:

	"""
	A synchronous event emitter used to announce score changes.

	Listeners run immediately, in registration order, on the caller's
	thread. Geometry is cheap to rebuild, so a listener typically just
	recomputes the bundle for the affected measure.
	"""

	def __init__ (self) -> None:

		"""
		Initialize an empty event registry.
		"""

		self._listeners: typing.Dict[str, typing.List[CallbackType]] = {}


	def on (self, event_name: str, callback: CallbackType) -> None:

		"""
		Register a callback for an event name.
		"""

		self._listeners.setdefault(event_name, []).append(callback)


	def off (self, event_name: str, callback: CallbackType) -> None:

		"""
		Unregister a previously registered callback.

		Raises ``ValueError`` if the callback is not registered for the event.
		"""

		if callback not in self._listeners.get(event_name, []):
			raise ValueError(f"Callback not registered for event {event_name!r}")

		self._listeners[event_name].remove(callback)


	def listener_count (self, event_name: str) -> int:
		return len(self._listeners.get(event_name, []))


	def emit (self, event_name: str, *args: typing.Any, **kwargs: typing.Any) -> None:

		"""
		Call every listener registered for *event_name*.

		Listeners added or removed while emitting take effect from the next
		emit.
		"""

		for callback in list(self._listeners.get(event_name, [])):
			callback(*args, **kwargs)
