# rngjump/oracle/__init__.py
# HTTP demo service serving one generator with jump-ahead.
