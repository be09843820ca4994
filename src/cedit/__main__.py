from cedit.cli.main import main

main()
