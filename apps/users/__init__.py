"""Users app package.

Defines the custom user model carrying the caller's ``Role`` (client or
admin) and the DRF permission classes built on it. Use
``apps.users.models.CustomUser`` as the AUTH_USER_MODEL throughout the
project.
"""
