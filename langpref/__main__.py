from langpref.main import run

run()
