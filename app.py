import os

from flask import Flask, render_template, send_from_directory

PORT = 3000
PUBLIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'public')

# Serve public/ from the URL root, so /css/style.css maps to public/css/style.css
app = Flask(__name__, static_folder=PUBLIC_DIR, static_url_path='')


@app.get('/login')
def login():
    return render_template('login.html', title='로그인 페이지')


@app.get('/posts')
def posts():
    return render_template('posts.html', title='게시판')


@app.get('/signup')
def signup():
    return render_template('signup.html', title='회원가입 페이지')


@app.get('/login2')
def login2():
    # Raw file, no templating
    return send_from_directory(app.static_folder, 'login.html')


if __name__ == '__main__':
    app.logger.setLevel('INFO')
    app.logger.info('서버가 실행됩니다: http://localhost:%d', PORT)
    app.run(port=PORT)
