'''
exceptions.py: exceptions defined by splashgen

The exceptions fall into two groups.  ConfigParseError and MissingSourceError
are detected before any image is generated and stop the whole run.
InvalidDimensionsError and ImageOperationError concern a single output image;
the pipeline records them in the report for that image's platform and keeps
going with the rest.

Copyright
---------

Copyright (c) 2021-2022 by the California Institute of Technology.  This code
is open-source software released under a 3-clause BSD license.  Please see the
file "LICENSE" for more information.
'''


class SplashgenError(Exception):
    '''Base class for splashgen exceptions.'''
    pass


class ConfigParseError(SplashgenError):
    '''The project config file is missing, unreadable or malformed.'''
    pass


class MissingSourceError(SplashgenError):
    '''The source splash image does not exist.'''
    pass


class InvalidDimensionsError(SplashgenError):
    '''A width or height given to the border computation is not positive.'''
    pass


class ImageOperationError(SplashgenError):
    '''An ImageMagick identify, crop or draw operation failed.'''
    pass
