'''
images.py: image operations used to produce splash screens

The actual pixel work is done by ImageMagick, through the Wand library.  The
methods of ImageOperations are coroutines so that the pipeline can run the
operations for all the images of a platform concurrently; each one moves the
blocking Wand call to a worker thread with asyncio.to_thread().

Any failure reported by Wand, or by the file system while reading or writing
an image, is turned into an ImageOperationError.

Copyright
---------

Copyright (c) 2021-2022 by the California Institute of Technology.  This code
is open-source software released under a 3-clause BSD license.  Please see the
file "LICENSE" for more information.
'''

import asyncio
import math
from   sidetrack import log
from   wand.color import Color
from   wand.drawing import Drawing
from   wand.exceptions import WandException
from   wand.image import Image

from   splashgen.exceptions import ImageOperationError
from   splashgen.ninepatch import marker_lines


# Public class definitions.
# .............................................................................

class ImageOperations():
    '''Asynchronous interface to the ImageMagick operations splashgen uses.'''

    async def identify(self, path):
        '''Return the (width, height) of the image in the file "path".'''
        return await _run(f'identify {path}', _identify, path)


    async def crop(self, src, dst, width, height):
        '''Resize & center-crop the image in "src" to width x height.

        The image is first scaled so that it covers the whole output size,
        then the excess is trimmed equally from both sides.  The result is
        written to "dst" in PNG format.
        '''
        return await _run(f'crop {src} to {dst}', _crop, src, dst, width, height)


    async def draw_border(self, src, dst, width, height, border):
        '''Write a 9-patch version of the image in "src" to "dst".

        "border" is a BorderSpec for an image of size width x height.
        '''
        return await _run(f'9-patch {src} to {dst}', _draw_border, src, dst,
                          width, height, border)


# Miscellaneous helper functions.
# .............................................................................

async def _run(description, func, *args):
    log(description)
    try:
        return await asyncio.to_thread(func, *args)
    except (WandException, OSError) as ex:
        raise ImageOperationError(f'Failed to {description}: {ex}') from ex


def _identify(path):
    with Image(filename = path) as image:
        return (image.width, image.height)


def _crop(src, dst, width, height):
    with Image(filename = src) as image:
        scale = max(width / image.width, height / image.height)
        image.resize(max(width, math.ceil(image.width * scale)),
                     max(height, math.ceil(image.height * scale)))
        image.crop(width = width, height = height, gravity = 'center')
        image.reset_coords()
        image.format = 'png'
        image.save(filename = dst)


def _draw_border(src, dst, width, height, border):
    with Image(filename = src) as image:
        # The frame must be fully transparent except for the black markers.
        image.alpha_channel = True
        image.border(Color('transparent'), 1, 1, compose = 'copy')
        with Drawing() as draw:
            draw.stroke_antialias = False
            draw.fill_color = Color('black')
            for start, end in marker_lines(width, height, border):
                draw.line(start, end)
            draw(image)
        image.format = 'png'
        image.save(filename = dst)
