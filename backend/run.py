import os

from scoreboard import create_app

app = create_app()

if __name__ == '__main__':
    port = int(os.environ.get('PORT', '3000'))
    app.run(port=port, debug=True)
