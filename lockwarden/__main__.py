from lockwarden.cli import main

main()
