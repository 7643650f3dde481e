"""Error types raised by the profile store and the rendering layer."""


class NotFoundError(Exception):
    """No stored document matches the profile identifier."""


class StoreError(Exception):
    """The store could not be reached or returned an undecodable document."""


class TemplateError(Exception):
    """The form template could not be loaded or rendered."""
