from treeconcat.cli import main

main()
