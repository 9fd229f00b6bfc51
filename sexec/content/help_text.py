"""
Help text for the se CLI.

Rendered with a command prefix: "se " from the shell, empty inside the REPL.
"""

TITLE = "se {version} -- saved shell commands"

HELP_TEXT = """
USAGE
-----

  {se}<name|#> [args...]        Run a saved command (short for "{se}run")
  {se}run <name|#> [args...]    Run a saved command                      (-r)
  {se}list                      List saved commands                      (-l)
  {se}view <name|#>             Show a command's name and template       (-v)
  {se}add [name]                Save a new command                       (-a)
  {se}edit <name|#>             Edit a command's name and template       (-e)
  {se}move <name|#>             Move a command to a new position         (-m)
  {se}del <name|#>              Delete a command                         (-d)
  {se}help                      Show this help                           (-h)


REFERENCES
----------

  Commands are referenced by their position in "{se}list" (1, 2, ...)
  or by exact name. Names are case-sensitive.


PLACEHOLDERS
------------

  Templates may contain %0, %1, ... which are replaced by the words of
  the invocation: %0 is the command reference itself, %1 the first
  argument after it, and so on.

    {se}add greet                 Name: greet
                                  Command: echo Hello, %1 and %2!
    {se}greet Alice Bob           Runs: echo Hello, Alice and Bob!
"""

REPL_HELP_FOOTER = """
  exit                      Leave the interactive shell
"""


def render_help(interactive: bool) -> str:
    """Help text phrased for the REPL (bare actions) or the shell (se <action>)."""
    text = HELP_TEXT.format(se="" if interactive else "se ")
    if interactive:
        text += REPL_HELP_FOOTER
    return text
