"""
Central Signal Registry for Event-Driven Architecture.

Uses blinker (Flask's signalling backend) so modules can react to each
other's events without importing each other.

Usage:
    # Publisher (sender)
    from lingualog_app.core.signals import card_reviewed
    card_reviewed.send(current_app._get_current_object(), user_id=1, item_id=2, was_correct=True)

    # Subscriber (receiver) - in module's events.py
    @card_reviewed.connect
    def on_card_reviewed(sender, **kwargs):
        ...
"""
from blinker import Namespace

account_signals = Namespace()

# Payload: user (User)
user_registered = account_signals.signal('user_registered')

content_signals = Namespace()

# Payload: user_id, language_id, language_code
language_created = content_signals.signal('language_created')

# Payload: user_id, item_id, language_id, item_type
item_created = content_signals.signal('item_created')

# Payload: user_id, item_id
item_deleted = content_signals.signal('item_deleted')

learning_signals = Namespace()

# Payload: user_id, item_id, language_id, was_correct, session_id
card_reviewed = learning_signals.signal('card_reviewed')
