from jsminify.cli import main

main()
