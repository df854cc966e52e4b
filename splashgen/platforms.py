'''
platforms.py: decide which platforms to generate splash screens for

The list of targets is built fresh for every run.  iOS and Android are
included if the user asked for them, or if the user did not single out
either one.  Windows is always included.  Whether a target is actually
processed depends on whether the platform has been added to the Cordova
project, which is detected by the presence of its "platforms/<name>"
directory.

By default a target's splash screens come from the built-in catalog and are
written into the platform's conventional resource directory.  With the
update-config setting, the iOS and Android lists come from config.xml
instead; the file names there are already complete relative paths, so the
target's output directory is empty.  Windows has no config.xml variant.

Copyright
---------

Copyright (c) 2021-2022 by the California Institute of Technology.  This code
is open-source software released under a 3-clause BSD license.  Please see the
file "LICENSE" for more information.
'''

from   dataclasses import dataclass
from   os.path import isdir, join
from   sidetrack import log
from   typing import Tuple

from   splashgen.catalog import Platform, SplashSpec, PLATFORMS


# Internal constants.
# .............................................................................

_XCODE_FOLDER     = 'Images.xcassets/LaunchImage.launchimage/'
_OLD_XCODE_FOLDER = 'Resources/splash/'


# Public data types.
# .............................................................................

@dataclass(frozen = True)
class PlatformTarget():
    '''Data class describing what to generate for one platform.'''
    name       : Platform                   # Which platform.
    is_present : bool                       # Added to the Cordova project?
    output_dir : str                        # Prefix for the spec names.
    specs      : Tuple[SplashSpec, ...]     # What to generate, in order.


# Public functions.
# .............................................................................

def select_targets(settings, resolved_config, project_name, base_dir = '.'):
    '''Return the list of PlatformTarget objects to process.

    "resolved_config" is the dict returned by config.resolve_config(), and
    "project_name" is the Cordova project name (used in the iOS path).  The
    presence of each platform is checked under the directory "base_dir".
    '''
    xcode_folder = _OLD_XCODE_FOLDER if settings.xcode_old else _XCODE_FOLDER
    default_dirs = {
        Platform.IOS     : f'platforms/ios/{project_name}/{xcode_folder}',
        Platform.ANDROID : 'platforms/android/res/',
    }

    targets = []
    for platform in [Platform.IOS, Platform.ANDROID]:
        if not (settings.all_platforms or getattr(settings, platform.value)):
            log(f'skipping {platform.value} as requested')
            continue
        if settings.update_config:
            output_dir = ''
            specs = tuple(resolved_config.get(platform.value, ()))
        else:
            output_dir = default_dirs[platform]
            specs = PLATFORMS[platform]
        targets.append(_target(platform, output_dir, specs, base_dir))

    targets.append(_target(Platform.WINDOWS, 'platforms/windows/images/',
                           PLATFORMS[Platform.WINDOWS], base_dir))
    return targets


def present_targets(targets):
    '''Return the targets whose platforms have been added to the project.'''
    return [target for target in targets if target.is_present]


# Miscellaneous helper functions.
# .............................................................................

def _target(platform, output_dir, specs, base_dir):
    is_present = isdir(join(base_dir, 'platforms', platform.value))
    log(f'{platform.value}: present = {is_present}, {len(specs)} splash screens,'
        f' output dir = "{output_dir}"')
    return PlatformTarget(platform, is_present, output_dir, tuple(specs))
