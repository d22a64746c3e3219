from ldraw_packer.cli import main

main()
