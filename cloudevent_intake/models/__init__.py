from .cloud_event import CloudEvent, REQUIRED_ATTRIBUTES

__all__ = ["CloudEvent", "REQUIRED_ATTRIBUTES"]
