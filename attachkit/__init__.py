"""Card and media message attachments with their wire encoding."""
