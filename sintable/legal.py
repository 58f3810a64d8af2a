import os
import re

PROJECT = "A series of table based sinewave generators"

COPYRIGHT = "the sintable authors"

LICENSE = (
    "This program is free software (firmware): you can redistribute it and/or\n"
    "modify it under the terms of the GNU General Public License as published\n"
    "by the Free Software Foundation, either version 3 of the License, or (at\n"
    "your option) any later version.\n"
    "\n"
    "This program is distributed in the hope that it will be useful, but WITHOUT\n"
    "ANY WARRANTY; without even the implied warranty of MERCHANTIBILITY or\n"
    "FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License\n"
    "for more details.\n"
    "\n"
    "License:\tGPL, v3, as defined and found on www.gnu.org,\n"
    "\t\thttp://www.gnu.org/licenses/gpl.html")

RULE = "/" * 80


def modulename(fname):
    """Derive a Verilog module name from an output file name."""
    name = os.path.splitext(os.path.basename(fname))[0]
    name = re.sub(r"[^A-Za-z0-9_$]", "_", name)
    if not name or not (name[0].isalpha() or name[0] == "_"):
        name = "_" + name
    return name


def _comment(text):
    return "\n".join(("// " + line) if line else "//"
                     for line in text.splitlines())


def legal(fp, fname, project, purpose, owner=COPYRIGHT, license_text=LICENSE):
    """Write the comment banner that opens every generated file."""
    # Continuation lines of the purpose text line up under its first line
    purpose = "\n//\t\t".join(purpose.splitlines())
    fp.write(RULE + "\n"
             "//\n"
             "// Filename: \t%s\n"
             "//\n"
             "// Project:\t%s\n"
             "//\n"
             "// Purpose:\t%s\n"
             "//\n"
             "// This file was generated by sintable.  Edits will be lost the\n"
             "// next time the generator runs.\n"
             "//\n"
             "%s\n"
             "//\n"
             "// Copyright (C) %s\n"
             "//\n"
             "%s\n"
             "//\n"
             "%s\n"
             "//\n"
             "`default_nettype\tnone\n"
             "//\n" % (os.path.basename(fname), project, purpose, RULE,
                       owner, _comment(license_text), RULE))
