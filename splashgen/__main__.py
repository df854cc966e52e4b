'''
__main__.py: main function for splashgen.

How splashgen works
-------------------

Splashgen is run from the root folder of a Cordova project.  It first checks
that the source splash image and the project's config.xml file exist; if
either one is missing, it stops without doing anything else.  It then reads
config.xml (for the project name, and for the list of splash screens if
--update-config is given), works out the list of platforms to process, and
generates the images for each platform that has been added to the project.

Errors that affect a single image (for example, an ImageMagick failure) are
reported in the list of results for the platform but do not stop the run.

Debug log
---------

If given the -@ argument, splashgen writes a detailed trace of what it is
doing to the given destination, which can be '-' to indicate console output,
or a file path.  The debug mode also enables Python's faulthandler and, on
systems other than Windows, lets you drop into pdb by sending the process
the signal USR1.

Copyright
---------

Copyright (c) 2021-2022 by the California Institute of Technology.  This code
is open-source software released under a 3-clause BSD license.  Please see the
file "LICENSE" for more information.
'''

import sys
if sys.version_info < (3, 9):
    print('splashgen requires Python version 3.9 or higher,')
    print('but the current version of Python is '
          + str(sys.version_info.major) + '.' + str(sys.version_info.minor) + '.')
    sys.exit(1)

from   commonpy.data_utils import timestamp, pluralized
from   commonpy.file_utils import writable
from   commonpy.string_utils import antiformat
import faulthandler
import os
from   os.path import dirname
import plac
from   sidetrack import set_debug, log

from   splashgen import __version__
from   splashgen.config import read_config, resolve_config, project_name
from   splashgen.exceptions import SplashgenError
from   splashgen.pipeline import check_inputs, run
from   splashgen.platforms import select_targets, present_targets
from   splashgen.settings import settings_from_args
from   splashgen.ui import header, tell_success, note_info, note_warn, note_error


# Main program.
# .............................................................................

@plac.annotations(
    config_file       = ('read Cordova config from file C (default: config.xml)', 'option', 'c'),
    splash_file       = ('use image S as the source (default: splash.png)'      , 'option', 's'),
    ios               = ('only generate splash screens for iOS'                 , 'flag'  , 'i'),
    android           = ('only generate splash screens for Android'             , 'flag'  , 'a'),
    nine_patch        = ('write 9-patch versions of all Android images'         , 'flag'  , 'n'),
    nine_patch_width  = ('horizontal 9-patch stretch fraction W (default: 0.25)', 'option', 'x'),
    nine_patch_height = ('vertical 9-patch stretch fraction H (default: 0.25)'  , 'option', 'y'),
    update_config     = ('generate the splash screens listed in the config file', 'flag'  , 'u'),
    xcode_old         = ('use the old Xcode path for iOS splash screens'        , 'flag'  , 'o'),
    version           = ('print program version info and exit'                  , 'flag'  , 'V'),
    debug             = ('log debug output to "OUT" ("-" is console)'           , 'option', '@'),
)
def main(config_file = 'C', splash_file = 'S', ios = False, android = False,
         nine_patch = False, nine_patch_width = 'W', nine_patch_height = 'H',
         update_config = False, xcode_old = False, version = False,
         debug = 'OUT'):
    '''
Splashgen generates the splash screen images of a Cordova project from a
single source image.  Run it from the root folder of the project.  It creates
correctly-sized PNG files for every platform that has been added to the
project (iOS, Android and Windows) in the folders where Cordova expects them.

Source image
~~~~~~~~~~~~

By default the source image is "splash.png" in the current folder; use the
option --splash-file to name a different one.  The image should be large
(at least 2732x2732 pixels) with the important content in the middle, because
each output is scaled to cover its size and then cropped at the edges.  If a
file named like the source image plus "-ios", "-android" or "-windows" (for
example, "splash-android.png") exists next to it, that file is used for the
corresponding platform.

Platforms
~~~~~~~~~

With no options, splash screens are generated for all platforms found in the
"platforms" folder.  The options --ios and --android restrict generation to
those platforms.  Windows images are always generated when the Windows
platform is present.

Using config.xml
~~~~~~~~~~~~~~~~

Splashgen reads the project name from config.xml (option --config-file
to name another file).  If given the option --update-config, it generates the
images listed by the <splash> elements of the iOS and Android platforms in
config.xml, at the paths and sizes given there, instead of its built-in list.

Android 9-patch images
~~~~~~~~~~~~~~~~~~~~~~

Android images whose names end in ".9.png" are additionally written as
9-patch images, which Android can stretch to fit screens of other sizes.
Option --nine-patch makes splashgen write 9-patch versions of all Android
images.  The size of the stretchable areas is controlled by the options
--nine-patch-width and --nine-patch-height, which are fractions of the image
size (default: 0.25 each).

Other options
~~~~~~~~~~~~~

The values of --config-file, --splash-file, --nine-patch-width and
--nine-patch-height can also be set using the environment variables
SPLASHGEN_CONFIG_FILE, SPLASHGEN_SPLASH_FILE, SPLASHGEN_NINE_PATCH_WIDTH and
SPLASHGEN_NINE_PATCH_HEIGHT, or in a "settings.ini" file.

If given the -V option, this program will print the version and other
information, and exit without doing anything else.

If given the -@ argument, this program will output a detailed trace of what it
is doing. The debug trace will be sent to the given destination, which can
be '-' to indicate console output, or a file path to send the output to a file.

Command-line arguments summary
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
'''

    # Process arguments -------------------------------------------------------

    if version:
        from splashgen import print_version
        print_version()
        sys.exit()

    config_debug(debug)                # Set up debugging before going further.

    log('='*8 + f' started {timestamp()} ' + '='*8)
    log('command line: ' + str(sys.argv))

    try:
        settings = settings_from_args(
            config_file       = None if config_file == 'C' else config_file,
            splash_file       = None if splash_file == 'S' else splash_file,
            ios               = ios,
            android           = android,
            nine_patch        = nine_patch,
            nine_patch_width  = None if nine_patch_width == 'W' else nine_patch_width,
            nine_patch_height = None if nine_patch_height == 'H' else nine_patch_height,
            update_config     = update_config,
            xcode_old         = xcode_old)
    except ValueError as ex:
        note_error(str(ex))
        sys.exit(1)

    log_config(settings)

    # Do the real work --------------------------------------------------------

    try:
        header('Checking project & splash')
        check_inputs(settings)
        manifest = read_config(settings.config_file)
        name = project_name(manifest)
        resolved = resolve_config(manifest) if settings.update_config else {}

        targets = select_targets(settings, resolved, name)
        present = present_targets(targets)
        if not present:
            note_warn('No Cordova platforms found. Make sure you are in the root'
                      ' folder of your Cordova project and add platforms with'
                      ' "cordova platform add".')
        else:
            tell_success('platforms found: '
                         + ', '.join(t.name.value for t in present))

        reports = run(targets, settings)
        print_summary(reports)
    except KeyboardInterrupt:
        # Catch it, but don't treat it as an error; just stop execution.
        log('keyboard interrupt received')
    except SplashgenError as ex:
        note_error(str(ex))
        sys.exit(1)
    except Exception as ex:             # noqa: PIE786
        from traceback import format_exception
        details = ''.join(format_exception(*sys.exc_info()))
        log('Exception info: ' + str(ex) + '\n' + details)
        note_error('Error: ' + str(ex))
        sys.exit(2)

    # And exit ----------------------------------------------------------------

    log('_'*8 + f' stopped {timestamp()} ' + '_'*8)


# Miscellaneous utilities local to this module.
# .............................................................................

def config_debug(debug_arg):
    '''Takes the value of the --debug flag & configures debugging accordingly.'''
    if debug_arg == 'OUT':
        return

    if debug_arg != '-':
        log_dir = dirname(debug_arg) or '.'
        if not writable(log_dir):
            note_error(f'Can\'t write debug output in {antiformat(log_dir)}')
            sys.exit(1)
    faulthandler.enable()
    if os.name != 'nt':                 # Can't use next part on Windows.
        import signal
        from boltons.debugutils import pdb_on_signal
        pdb_on_signal(signal.SIGUSR1)

    # Turn on debug tracing to the destination we ended up deciding to use.
    set_debug(True, debug_arg)
    note_info('Debug logging is on. "kill -USR1 pid" for pdb.')
    log('debug_arg = ' + debug_arg)


def log_config(settings):
    '''Write the configuration to the log file.'''
    import platform
    log(f'splashgen version = {__version__}')
    log(f'system            = {platform.system()}')
    log(f'config_file       = {settings.config_file}')
    log(f'splash_file       = {settings.splash_file}')
    log(f'all_platforms     = {settings.all_platforms}')
    log(f'ios               = {settings.ios}')
    log(f'android           = {settings.android}')
    log(f'nine_patch        = {settings.nine_patch}')
    log(f'nine_patch_width  = {settings.nine_patch_width}')
    log(f'nine_patch_height = {settings.nine_patch_height}')
    log(f'update_config     = {settings.update_config}')
    log(f'xcode_old         = {settings.xcode_old}')


def print_summary(reports):
    '''Print a one-line summary of the results of all platforms.'''
    total = sum(len(report.results) for report in reports)
    failed = sum(len(report.failures) for report in reports)
    print('')
    if failed:
        note_warn(f'{pluralized("splash screen", total, True)} attempted,'
                  f' {failed} failed.')
    elif total:
        note_info(f'{pluralized("splash screen", total, True)} created.')


# Main entry point.
# .............................................................................

# The following entry point definition is for the console_scripts keyword
# option to setuptools.  The entry point for console_scripts has to be a
# function that takes zero arguments.
def console_scripts_main():
    plac.call(main)


# The following allows users to invoke this using "python3 -m splashgen".
if __name__ == '__main__':
    plac.call(main)
