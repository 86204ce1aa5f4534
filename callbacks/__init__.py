# callbacks/__init__.py
