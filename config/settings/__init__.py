"""Settings modules for the Hotel Paradise reservation service.

``base`` holds everything shared; ``dev``, ``prod`` and ``test`` override
it. Select one through ``DJANGO_SETTINGS_MODULE``.
"""
