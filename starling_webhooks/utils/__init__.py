from .factories import PayloadFactory, WebhookFactory, money

__all__ = [
    "PayloadFactory", "WebhookFactory", "money",
]
