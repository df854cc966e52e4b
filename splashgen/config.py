'''
config.py: read the splash screen definitions in a Cordova config.xml file

A Cordova project's config.xml looks roughly like this:

    <widget id="org.example.app" xmlns="http://www.w3.org/ns/widgets">
        <name>MyApp</name>
        <platform name="android">
            <splash src="res/screen/android/land-hdpi.png" density="land-hdpi"/>
            ...
        </platform>
        <platform name="ios">
            <splash src="res/screen/ios/Default~iphone.png" width="320" height="480"/>
            ...
        </platform>
    </widget>

When splashgen is told to update the resources listed in config.xml (the
--update-config option), the <splash> elements determine what gets written:
the "src" attribute is the output path and "width" and "height" are the
size.  For Android, if the element has a "density" attribute that names one
of the densities in the built-in catalog, the size from the catalog is used
instead of the element's own width and height.

Cordova puts the document in the W3C widgets namespace.  The functions here
match elements by their local names so that files with or without the
namespace declaration are handled the same way.

Copyright
---------

Copyright (c) 2021-2022 by the California Institute of Technology.  This code
is open-source software released under a 3-clause BSD license.  Please see the
file "LICENSE" for more information.
'''

from   commonpy.string_utils import antiformat
from   fastnumbers import isint
from   sidetrack import log
from   xml.etree import ElementTree

from   splashgen.catalog import SplashSpec, DENSITY_TABLE
from   splashgen.exceptions import ConfigParseError


# Public functions.
# .............................................................................

def read_config(config_file):
    '''Read and parse the XML file config_file and return the root element.'''
    log(f'reading {antiformat(config_file)}')
    try:
        with open(config_file, 'rb') as f:
            return _parsed(f.read())
    except OSError as ex:
        raise ConfigParseError(f'Unable to read {config_file}: {ex.strerror}')


def resolve_config(manifest):
    '''Return a dict mapping platform names to lists of SplashSpec objects.

    The argument can be either the root element returned by read_config(), or
    the text of a config.xml file.  The lists are in the same order as the
    <splash> elements in the document.
    '''
    root = _root(manifest)
    platform_elements = _children(root, 'platform')
    if not platform_elements:
        raise ConfigParseError('No <platform> elements found in config file')

    platforms = {}
    for element in platform_elements:
        name = element.get('name')
        if not name:
            raise ConfigParseError('<platform> element lacks a name attribute')
        platforms[name] = [_splash_spec(s) for s in _children(element, 'splash')]
        log(f'config file lists {len(platforms[name])} splash screens for {name}')
    return platforms


def project_name(manifest):
    '''Return the project name given by the <name> element of the config.'''
    names = _children(_root(manifest), 'name')
    if not names or not (names[0].text or '').strip():
        raise ConfigParseError('No project <name> found in config file')
    return names[0].text.strip()


# Miscellaneous helper functions.
# .............................................................................

def _parsed(text):
    try:
        return ElementTree.fromstring(text)
    except ElementTree.ParseError as ex:
        raise ConfigParseError(f'Config file is not valid XML: {ex}')


def _root(manifest):
    root = _parsed(manifest) if isinstance(manifest, (str, bytes)) else manifest
    if _local_name(root.tag) != 'widget':
        raise ConfigParseError('Config file root element is not <widget>')
    return root


def _local_name(tag):
    # ElementTree writes namespaced tags as "{uri}name".
    return tag.rpartition('}')[2]


def _children(element, name):
    return [child for child in element if _local_name(child.tag) == name]


def _splash_spec(element):
    src = element.get('src')
    if not src:
        raise ConfigParseError('<splash> element lacks a src attribute')
    density = element.get('density')
    if density in DENSITY_TABLE:
        # The density always takes precedence over a declared width & height.
        width, height = DENSITY_TABLE[density]
        return SplashSpec(src, width, height, density)

    width, height = element.get('width'), element.get('height')
    if not (isint(width) and isint(height)) or min(int(width), int(height)) <= 0:
        raise ConfigParseError(f'<splash> element for {src} lacks a valid'
                               ' width and height')
    return SplashSpec(src, int(width), int(height), density)
