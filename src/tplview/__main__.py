from tplview.cli import main

main()
