from relcfg.cli.app import main

main()
