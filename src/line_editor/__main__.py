from line_editor.cli import main

main()
