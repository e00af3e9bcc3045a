from tripdesk.cli import main

main()
