# exsel/banner.py

from exsel.colors import Colors
from exsel.metadata import AUTHOR, VERSION

author = AUTHOR
ver = VERSION

def show_banner(menu_status="No active filters"):
    grey = Colors.GREY
    yellow = Colors.YELLOW
    cyan = Colors.CYAN
    reset = Colors.RESET

    print(f"{grey}       d88888b db    db .d8888. d88888b db{reset}")
    print(f"{grey}       88'     `8b  d8' 88'  YP 88'     88{reset}")
    print(f"{grey}       88ooooo  `8bd8'  `8bo.   88ooooo 88{reset}")
    print(f"{grey}       88~~~~~  .dPYb.    `Y8b. 88~~~~~ 88{reset}")
    print(f"{grey}       88.     .8P  Y8. db   8D 88.     88booo.{reset}")
    print(f"{grey}       Y88888P YP    YP `8888Y' Y88888P Y88888P{reset}")
    print(f"{yellow}                                              v{ver}{reset}")
    print("_________________________________________________________")
    print(f"{cyan}   Excellent Selection text filters - by {author}{reset}")
    print(f"{cyan}              Menu: {menu_status}{reset}\n")
