'''
settings.py: run-time settings for splashgen

All the values that control a run are gathered into a single Settings object
when splashgen starts.  The object is immutable and is handed explicitly to
the functions that need it; nothing in splashgen looks up settings globally.

Values given on the command line take precedence.  Values not given on the
command line are looked up using python-decouple, which means they can be set
in environment variables or in a "settings.ini" or ".env" file in the current
directory (or one of its parents):

  SPLASHGEN_CONFIG_FILE         path to Cordova's config.xml
  SPLASHGEN_SPLASH_FILE         path to the source splash image
  SPLASHGEN_NINE_PATCH_WIDTH    horizontal stretch fraction for 9-patch images
  SPLASHGEN_NINE_PATCH_HEIGHT   vertical stretch fraction for 9-patch images

If neither provides a value, the built-in defaults are used.

Copyright
---------

Copyright (c) 2021-2022 by the California Institute of Technology.  This code
is open-source software released under a 3-clause BSD license.  Please see the
file "LICENSE" for more information.
'''

from   dataclasses import dataclass
from   decouple import AutoConfig
from   fastnumbers import isfloat, isint
from   sidetrack import log
import os


# Internal constants.
# .............................................................................

_DEFAULT_CONFIG_FILE = 'config.xml'
_DEFAULT_SPLASH_FILE = 'splash.png'
_DEFAULT_STRETCH     = 0.25


# Public data types.
# .............................................................................

@dataclass(frozen = True)
class Settings():
    '''Immutable collection of the settings for one run of splashgen.'''
    config_file       : str   = _DEFAULT_CONFIG_FILE
    splash_file       : str   = _DEFAULT_SPLASH_FILE
    ios               : bool  = False
    android           : bool  = False
    nine_patch        : bool  = False
    nine_patch_width  : float = _DEFAULT_STRETCH
    nine_patch_height : float = _DEFAULT_STRETCH
    update_config     : bool  = False
    xcode_old         : bool  = False

    @property
    def all_platforms(self):
        '''True if neither iOS nor Android was singled out.'''
        return not self.ios and not self.android


# Public functions.
# .............................................................................

def settings_from_args(config_file = None, splash_file = None, ios = False,
                       android = False, nine_patch = False,
                       nine_patch_width = None, nine_patch_height = None,
                       update_config = False, xcode_old = False):
    '''Return a Settings object using the given values & configured defaults.

    Arguments left as None are looked up with python-decouple, starting
    from the current directory.  Raises ValueError if a stretch fraction is
    not a number between 0 and 1.
    '''
    config = AutoConfig(search_path = os.getcwd())
    if not config_file:
        config_file = config('SPLASHGEN_CONFIG_FILE', default = _DEFAULT_CONFIG_FILE)
    if not splash_file:
        splash_file = config('SPLASHGEN_SPLASH_FILE', default = _DEFAULT_SPLASH_FILE)
    if nine_patch_width is None:
        nine_patch_width = config('SPLASHGEN_NINE_PATCH_WIDTH',
                                  default = _DEFAULT_STRETCH)
    if nine_patch_height is None:
        nine_patch_height = config('SPLASHGEN_NINE_PATCH_HEIGHT',
                                   default = _DEFAULT_STRETCH)
    settings = Settings(config_file       = config_file,
                        splash_file       = splash_file,
                        ios               = bool(ios),
                        android           = bool(android),
                        nine_patch        = bool(nine_patch),
                        nine_patch_width  = _fraction(nine_patch_width, 'width'),
                        nine_patch_height = _fraction(nine_patch_height, 'height'),
                        update_config     = bool(update_config),
                        xcode_old         = bool(xcode_old))
    log(f'settings: {settings}')
    return settings


# Miscellaneous helper functions.
# .............................................................................

def _fraction(value, axis):
    if not (isfloat(value) or isint(value)):
        raise ValueError(f'9-patch {axis} value is not a number: {value}')
    value = float(value)
    if not 0 <= value <= 1:
        raise ValueError(f'9-patch {axis} value must be between 0 and 1: {value}')
    return value
