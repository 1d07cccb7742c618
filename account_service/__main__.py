from account_service.main import run

run()
