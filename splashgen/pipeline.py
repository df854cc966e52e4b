'''
pipeline.py: generate the splash screen images for a list of platforms

Order of events
---------------

Platforms are processed one after another, in the order of the target list.
For each platform, the images are all started at once as asyncio tasks, and
the platform is finished when every one of them has either succeeded or
failed.  Only then does the next platform start.

A failure affects only the image in which it happened, whatever the kind of
exception; unexpected errors are recorded too, with their traceback logged.
The outcome of each image is recorded in a SpecResult, the results for a
platform are collected in a PlatformReport, and the report is printed after
the whole platform is done.  Problems that make the whole run pointless (no source image, no
config file) are detected by check_inputs() before any of this starts.

Producing one image
-------------------

1. pick the source: "splash-<platform>.png" if it exists next to the default
   source image, otherwise the default source image;
2. create the destination directory;
3. find out the size of the source image;
4. resize and crop the source to the exact output size;
5. for Android, if the output name ends in ".9.png" or 9-patch output was
   requested for all images, compute the stretch markers and write a
   bordered copy under the ".9.png" name.  The plain image is always written
   under the ".png" name.

Copyright
---------

Copyright (c) 2021-2022 by the California Institute of Technology.  This code
is open-source software released under a 3-clause BSD license.  Please see the
file "LICENSE" for more information.
'''

import asyncio
from   commonpy.data_utils import pluralized
from   commonpy.file_utils import readable
from   dataclasses import dataclass, field
from   os import makedirs
from   os.path import exists, dirname, join
from   sidetrack import log
from   typing import List, Optional

from   splashgen.catalog import Platform, SplashSpec
from   splashgen.exceptions import ConfigParseError, MissingSourceError
from   splashgen.exceptions import SplashgenError, ImageOperationError
from   splashgen.ninepatch import compute_border, is_nine_patch
from   splashgen.ninepatch import plain_name, nine_patch_name
from   splashgen.platforms import present_targets
from   splashgen.ui import header, tell_success, tell_failure


# Public data types.
# .............................................................................

@dataclass(frozen = True)
class SpecResult():
    '''Outcome of generating the image for one SplashSpec.'''
    spec  : SplashSpec
    error : Optional[Exception] = None

    @property
    def ok(self):
        return self.error is None


@dataclass
class PlatformReport():
    '''Outcomes of generating all the images of one platform.'''
    platform : Platform
    results  : List[SpecResult] = field(default_factory = list)

    @property
    def failures(self):
        return [r for r in self.results if not r.ok]


# Public functions.
# .............................................................................

def check_inputs(settings):
    '''Raise an exception if the splash image or the config file is missing.'''
    if not exists(settings.splash_file) or not readable(settings.splash_file):
        raise MissingSourceError(f'{settings.splash_file} does not exist')
    tell_success(f'{settings.splash_file} exists')
    if not exists(settings.config_file) or not readable(settings.config_file):
        raise ConfigParseError(f'Cordova\'s {settings.config_file} does not exist')
    tell_success(f'{settings.config_file} exists')


def source_for(settings, platform):
    '''Return the path of the source image to use for the given platform.'''
    src = settings.splash_file
    if src.endswith('.png'):
        override = src[:-len('.png')] + f'-{platform.value}.png'
        if exists(override):
            log(f'using {override} for {platform.value}')
            return override
    return src


def run(targets, settings, ops = None, base_dir = '.'):
    '''Synchronous wrapper around generate_splashes().'''
    return asyncio.run(generate_splashes(targets, settings, ops, base_dir))


async def generate_splashes(targets, settings, ops = None, base_dir = '.'):
    '''Generate splash screens for the present targets, one platform at a time.

    Returns a list of PlatformReport objects, one per platform processed.
    '''
    if ops is None:
        from splashgen.images import ImageOperations
        ops = ImageOperations()
    reports = []
    for target in present_targets(targets):
        reports.append(await generate_for_platform(target, settings, ops, base_dir))
    return reports


async def generate_for_platform(target, settings, ops, base_dir = '.'):
    '''Generate all the images of one target concurrently.'''
    header(f'Generating splash screens for {target.name.value}')
    tasks = [generate_splash(target, spec, settings, ops, base_dir)
             for spec in target.specs]
    outcomes = await asyncio.gather(*tasks, return_exceptions = True)
    results = [_as_result(spec, outcome)
               for spec, outcome in zip(target.specs, outcomes)]
    report = PlatformReport(target.name, results)
    _print_report(report)
    return report


async def generate_splash(target, spec, settings, ops, base_dir = '.'):
    '''Generate the image for one SplashSpec and return a SpecResult.'''
    try:
        await _generate(target, spec, settings, ops, base_dir)
        return SpecResult(spec)
    except SplashgenError as ex:
        log(f'failed to generate {spec.name}: {str(ex)}')
        return SpecResult(spec, ex)


# Miscellaneous helper functions.
# .............................................................................

async def _generate(target, spec, settings, ops, base_dir):
    src = await asyncio.to_thread(source_for, settings, target.name)
    dst = join(base_dir, target.output_dir + spec.name)
    nine_patch = (target.name == Platform.ANDROID
                  and (is_nine_patch(dst) or settings.nine_patch))
    dst = plain_name(dst)

    dst_dir = dirname(dst)
    if dst_dir and not await asyncio.to_thread(exists, dst_dir):
        log(f'creating directory {dst_dir}')
        try:
            await asyncio.to_thread(makedirs, dst_dir, exist_ok = True)
        except OSError as ex:
            raise ImageOperationError(f'Unable to create {dst_dir}: {ex}') from ex

    src_width, src_height = await ops.identify(src)
    await ops.crop(src, dst, spec.width, spec.height)
    if nine_patch:
        border = compute_border(src_width, src_height, spec.width, spec.height,
                                settings.nine_patch_width, settings.nine_patch_height)
        log(f'9-patch border for {spec.name}: {border}')
        await ops.draw_border(dst, nine_patch_name(dst), spec.width, spec.height,
                              border)


def _as_result(spec, outcome):
    if isinstance(outcome, SpecResult):
        return outcome
    if not isinstance(outcome, Exception):
        raise outcome
    # Anything other than a SplashgenError is unexpected, so keep the details.
    from traceback import format_exception
    details = ''.join(format_exception(type(outcome), outcome, outcome.__traceback__))
    log(f'unexpected error generating {spec.name}: {details}')
    return SpecResult(spec, outcome)


def _print_report(report):
    for result in report.results:
        if result.ok:
            tell_success(f'{result.spec.name} created')
        else:
            tell_failure(f'{result.spec.name} failed: {str(result.error)}')
    total = len(report.results)
    failed = len(report.failures)
    log(f'{report.platform.value}: {pluralized("image", total, True)} attempted,'
        f' {failed} failed')
