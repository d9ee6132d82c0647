from gpustatus import cli


def main():
    cli.status()


if __name__ == '__main__':
    main()
