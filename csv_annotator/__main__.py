from csv_annotator.cli import main

main()
