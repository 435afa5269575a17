# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

import sys

from exprlib.utils._conf import ConfMod

# the module is replaced by a ConfMod instance, so callers can do
#   from exprlib.utils import conf
#   conf.get("cli", "prompt")  or  conf.cli.prompt
sys.modules[__name__] = ConfMod(__name__)
