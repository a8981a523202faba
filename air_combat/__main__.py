from air_combat.core.runtime.main_loop import MainLoop


def main():
    MainLoop().run()


if __name__ == "__main__":
    main()
