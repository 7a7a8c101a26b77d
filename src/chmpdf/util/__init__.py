"""
chmpdf/util
~~~~~~~~~~~
"""
