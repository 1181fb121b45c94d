from atmfjstc.lib.header_table.cli import main


if __name__ == '__main__':
    main()
