# File: lingualog_app/modules/flashcards/events.py
from lingualog_app.core.signals import card_reviewed, item_deleted


@card_reviewed.connect
def on_card_reviewed(sender, **kwargs):
    sender.logger.info(
        "Review recorded: user=%s item=%s correct=%s",
        kwargs.get('user_id'),
        kwargs.get('item_id'),
        kwargs.get('was_correct'),
    )


@item_deleted.connect
def on_item_deleted(sender, **kwargs):
    sender.logger.debug("Review history of item %s removed with it", kwargs.get('item_id'))
