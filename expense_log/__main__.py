from expense_log.menu.main import main

main()
