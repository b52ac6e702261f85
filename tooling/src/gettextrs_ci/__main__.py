from gettextrs_ci.cli.main import main

main()
