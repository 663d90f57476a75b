from vcrc.cli.main import main

main()
