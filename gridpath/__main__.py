from gridpath.app.viewer import main

main()
