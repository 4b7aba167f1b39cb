from .capabilities import HostCapabilities, detect_capabilities
