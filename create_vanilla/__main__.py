from create_vanilla.cli import main

main()
