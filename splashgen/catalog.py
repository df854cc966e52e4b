'''
catalog.py: built-in tables of the splash screens each platform needs

Each platform supported by splashgen expects a fixed set of launch images.
The tables below list them as SplashSpec objects: the output file name
(relative to the platform's resource directory), the pixel size, and for
Android, the density qualifier that Cordova uses in config.xml.

The Android entries double as the density table used when reading config.xml:
a <splash density="land-hdpi" .../> element gets the size listed here for
"land-hdpi", whatever width and height the element itself declares.

Copyright
---------

Copyright (c) 2021-2022 by the California Institute of Technology.  This code
is open-source software released under a 3-clause BSD license.  Please see the
file "LICENSE" for more information.
'''

from   dataclasses import dataclass
from   enum import Enum, EnumMeta
from   typing import Optional


# Public data types.
# .............................................................................

class _MetaPlatform(EnumMeta):
    '''Meta class that lets "'ios' in Platform" test for a valid value.'''
    def __contains__(cls, item):
        try:
            cls(item)
        except ValueError:
            return False
        return True


# Inheriting from str lets the values be compared directly against the
# platform names that appear in config.xml and in directory names.

class Platform(str, Enum, metaclass = _MetaPlatform):
    '''Enumeration of the Cordova platforms splashgen knows about.'''

    IOS     = 'ios'
    ANDROID = 'android'
    WINDOWS = 'windows'


@dataclass(frozen = True)
class SplashSpec():
    '''Data class describing one splash screen image to be generated.'''
    name    : str                       # Relative output path.
    width   : int                       # Pixels.
    height  : int                       # Pixels.
    density : Optional[str] = None      # Android density qualifier, if any.


# Exported constants.
# .............................................................................

PLATFORMS = {
    Platform.IOS: (
        # iPhone
        SplashSpec('Default~iphone.png',            320,  480),
        SplashSpec('Default@2x~iphone.png',         640,  960),
        SplashSpec('Default-568h@2x~iphone.png',    640,  1136),
        SplashSpec('Default-667h.png',              750,  1334),
        SplashSpec('Default-736h.png',              1242, 2208),
        SplashSpec('Default-Landscape-736h.png',    2208, 1242),
        # iPad
        SplashSpec('Default-Portrait~ipad.png',     768,  1024),
        SplashSpec('Default-Portrait@2x~ipad.png',  1536, 2048),
        SplashSpec('Default-Landscape~ipad.png',    1024, 768),
        SplashSpec('Default-Landscape@2x~ipad.png', 2048, 1536),
    ),
    Platform.ANDROID: (
        # Landscape
        SplashSpec('drawable-land-ldpi/screen.png',    320,  200,  'land-ldpi'),
        SplashSpec('drawable-land-mdpi/screen.png',    480,  320,  'land-mdpi'),
        SplashSpec('drawable-land-hdpi/screen.png',    800,  480,  'land-hdpi'),
        SplashSpec('drawable-land-xhdpi/screen.png',   1280, 720,  'land-xhdpi'),
        SplashSpec('drawable-land-xxhdpi/screen.png',  1600, 960,  'land-xxhdpi'),
        SplashSpec('drawable-land-xxxhdpi/screen.png', 1920, 1280, 'land-xxxhdpi'),
        # Portrait
        SplashSpec('drawable-port-ldpi/screen.png',    200,  320,  'port-ldpi'),
        SplashSpec('drawable-port-mdpi/screen.png',    320,  480,  'port-mdpi'),
        SplashSpec('drawable-port-hdpi/screen.png',    480,  800,  'port-hdpi'),
        SplashSpec('drawable-port-xhdpi/screen.png',   720,  1280, 'port-xhdpi'),
        SplashSpec('drawable-port-xxhdpi/screen.png',  960,  1600, 'port-xxhdpi'),
        SplashSpec('drawable-port-xxxhdpi/screen.png', 1280, 1920, 'port-xxxhdpi'),
    ),
    Platform.WINDOWS: (
        # Landscape
        SplashSpec('SplashScreen.scale-100.png',      620,  300),
        SplashSpec('SplashScreen.scale-125.png',      775,  375),
        SplashSpec('SplashScreen.scale-150.png',      930,  450),
        SplashSpec('SplashScreen.scale-200.png',      1240, 600),
        SplashSpec('SplashScreen.scale-400.png',      2480, 1200),
        # Portrait
        SplashSpec('SplashScreenPhone.scale-240.png', 1152, 1920),
        SplashSpec('SplashScreenPhone.scale-140.png', 672,  1120),
        SplashSpec('SplashScreenPhone.scale-100.png', 480,  800),
    ),
}
'''Splash screens required by each platform, in generation order.'''

DENSITY_TABLE = {spec.density: (spec.width, spec.height)
                 for spec in PLATFORMS[Platform.ANDROID]}
'''Map of Android density qualifier to canonical (width, height).'''
