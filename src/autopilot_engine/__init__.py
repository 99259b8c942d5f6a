"""autopilot-engine: toggleable autopilot injection for generated tour scripts.

Keeps three variants of a project's live script side by side:

    script_general.js            live, what the viewer loads
    backup_script_general.js     write-once copy of the original live file
    modified_script_general.js   live file with the autopilot block spliced in

and switches the live file between the original and autopilot content.
"""

__version__ = "0.1.0"
