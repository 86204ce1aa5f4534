# layout/__init__.py
