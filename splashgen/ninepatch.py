'''
ninepatch.py: compute the stretch markers of Android 9-patch splash screens

An Android 9-patch image is a PNG with an extra 1-pixel border around it.
Black pixels in the top border row mark the columns that may be stretched
horizontally, and black pixels in the left border column mark the rows that
may be stretched vertically.  Splashgen marks one stretchable run at each
end of both edges, leaving the middle of the image (where the logo usually
sits) at a fixed size.

The size of the runs comes from two fractions set by the user, one for each
axis (--nine-patch-width and --nine-patch-height, 0.25 by default).  Both
are scaled by the larger dimension of the output image.  The axis along which
the image is shorter is then recomputed from the other one, so that the fixed
middle part keeps the proportions of the output:

    new_size    = max(width, height)
    ratio       = width / height
    base_border = 0.25 * new_size
    x_border    = horizontal fraction * new_size
    y_border    = vertical fraction * new_size

    if ratio < 1:   x_border = (base_border - y_border) * ratio
    else:           y_border = (base_border - x_border) * ratio

The source image dimensions appear in the formulas below but cancel out.
They are kept so that the results match the images produced by earlier
versions of this tool exactly.

Copyright
---------

Copyright (c) 2021-2022 by the California Institute of Technology.  This code
is open-source software released under a 3-clause BSD license.  Please see the
file "LICENSE" for more information.
'''

from   collections import namedtuple
import math

from   splashgen.exceptions import InvalidDimensionsError


# Public data types.
# .............................................................................

BorderSpec = namedtuple('BorderSpec', 'left right top bottom')
'''Stretch marker boundaries, in pixels of the (unbordered) output image.

The top edge is marked black from column 1 to "left" and from "right" to the
image width; the left edge from row 1 to "top" and from "bottom" to the
image height.
'''


# Public functions.
# .............................................................................

def compute_border(source_width, source_height, dest_width, dest_height,
                   horiz_frac, vert_frac):
    '''Return a BorderSpec for an output image of size dest_width x dest_height.

    Raises InvalidDimensionsError if any of the dimensions is not positive.
    '''
    dimensions = (source_width, source_height, dest_width, dest_height)
    if any(not d or d <= 0 for d in dimensions):
        raise InvalidDimensionsError('Cannot compute 9-patch border for source'
                                     f' size {source_width}x{source_height}'
                                     f' and output size {dest_width}x{dest_height}')

    new_size = max(dest_width, dest_height)
    ratio = dest_width / dest_height

    base_border = ((source_height * 0.25) * new_size) / source_height
    y_border = ((source_height * vert_frac) * new_size) / source_height
    x_border = ((source_width * horiz_frac) * new_size) / source_width

    if ratio < 1:
        x_border = (base_border - y_border) * ratio
    else:
        y_border = (base_border - x_border) * ratio

    x_border = _rounded(x_border)
    y_border = _rounded(y_border)
    return BorderSpec(left = x_border, right = dest_width - x_border,
                      top = y_border, bottom = dest_height - y_border)


def marker_lines(width, height, border):
    '''Return the black line segments to draw in the 1-pixel frame.

    Coordinates are in the bordered image, whose frame row and column are
    row 0 and column 0.  The result is a list of ((x1, y1), (x2, y2)) pairs.
    An edge whose stretch run is empty gets no markers, because a black
    pixel in a corner of the frame makes the 9-patch image invalid.
    '''
    lines = []
    if border.left >= 1:
        lines.append(((1, 0), (border.left, 0)))
        lines.append(((border.right, 0), (width, 0)))
    if border.top >= 1:
        lines.append(((0, 1), (0, border.top)))
        lines.append(((0, border.bottom), (0, height)))
    return lines


def is_nine_patch(name):
    '''Return True if the file name has the 9-patch suffix ".9.png".'''
    return name.endswith('.9.png')


def plain_name(name):
    '''Return the name with a ".9.png" suffix replaced by ".png".'''
    return name[:-len('.9.png')] + '.png' if is_nine_patch(name) else name


def nine_patch_name(name):
    '''Return the name with a ".png" suffix replaced by ".9.png".'''
    if is_nine_patch(name):
        return name
    return (name[:-len('.png')] if name.endswith('.png') else name) + '.9.png'


# Miscellaneous helper functions.
# .............................................................................

def _rounded(value):
    # Halves round up (toward positive infinity), unlike Python's round().
    return int(math.floor(value + 0.5))
