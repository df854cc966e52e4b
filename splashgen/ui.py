'''
ui.py: user interface utilities for splashgen

Splashgen is a command-line program, and all its output to the user goes to
the terminal via Rich.  There are two groups of functions here:

1) the tell_* functions and header() print a line of progress output
2) the note_* functions print messages that stand apart from the progress
   output: info messages in color, warnings and errors inside a panel

Every message is also written to the debug log (if debugging is on).

Copyright
---------

Copyright (c) 2021-2022 by the California Institute of Technology.  This code
is open-source software released under a 3-clause BSD license.  Please see the
file "LICENSE" for more information.
'''

from   commonpy.string_utils import antiformat
from   rich import print
from   rich.markup import escape
from   rich.panel import Panel
from   rich.style import Style
from   sidetrack import log


# Progress output.
# .............................................................................

def header(text):
    '''Print a section header.'''
    log(antiformat(text))
    print('')
    print(' [cyan underline]' + escape(text) + '[/]')
    print('')


def tell_success(text):
    '''Print a line with a green check mark in front of it.'''
    log(antiformat(text))
    print('  [green]✓[/]  ' + escape(text))


def tell_failure(text):
    '''Print a line with a red cross in front of it.'''
    log(antiformat(text))
    print('  [red]✗[/]  ' + escape(text))


# Messages.
# .............................................................................

def note_info(text):
    '''Print an informational message.'''
    log(antiformat(text))
    print('[green]' + escape(text) + '[/]')


def note_warn(text):
    '''Print a warning message inside a yellow panel.'''
    log(antiformat(text))
    width = 79 if len(text) > 75 else (len(text) + 4)
    print(Panel(escape(text), style = Style.parse('yellow'), width = width))


def note_error(text):
    '''Print an error message inside a red panel.'''
    log(antiformat(text))
    width = 79 if len(text) > 75 else (len(text) + 4)
    print(Panel(escape(text), style = Style.parse('red'), width = width))
