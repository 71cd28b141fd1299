"""
This package contains helpful mixin classes to provide basic functionality throughout rotcalc.
"""

from rotcalc.utilities.mixin_classes.user_option_configured import UserOptionConfigured

__all__ = ["UserOptionConfigured"]
