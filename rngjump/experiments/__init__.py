# rngjump/experiments/__init__.py
