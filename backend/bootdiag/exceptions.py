from __future__ import annotations

"""backend/bootdiag/exceptions.py

Exceptions raised by an application while it starts up.

Application code (component wiring, server bootstrap) raises these so that
the failure decoder can recognise them. Typical shape::

    try:
        server.bind(port)
    except PortInUseError as exc:
        raise ApplicationContextError("Unable to start web server") from exc
"""


class StartupError(Exception):
    """Base class for all startup failures raised by the framework."""


class ApplicationContextError(StartupError):
    """The application context could not be initialized."""


class PortInUseError(StartupError):
    def __init__(self, port: int):
        super().__init__(f"Port {port} is already in use")
        self.port = port


class SocketError(OSError):
    """Low-level network failure while starting up."""


class BindError(StartupError):
    """Binding the configured server address failed."""


class BeanCreationError(StartupError):
    def __init__(self, bean_name: str, message: str):
        super().__init__(f"Error creating bean with name '{bean_name}': {message}")
        self.bean_name = bean_name


class UnsatisfiedDependencyError(BeanCreationError):
    def __init__(self, bean_name: str, dependency: str):
        super().__init__(
            bean_name,
            f"Unsatisfied dependency expressed through '{dependency}'",
        )
        self.dependency = dependency


class NoSuchBeanDefinitionError(StartupError, LookupError):
    def __init__(self, bean_name: str):
        super().__init__(f"No bean named '{bean_name}' available")
        self.bean_name = bean_name
