from directchat.setup.ioc.handlers import HandlerProvider

__all__ = ["HandlerProvider"]
