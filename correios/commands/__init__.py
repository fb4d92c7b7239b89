from correios.commands import store, tracker, version
