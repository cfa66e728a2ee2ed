# run.py
from holiday_checker import create_app

app = create_app()

if __name__ == '__main__':
    print("\nRegistered routes:")
    for rule in app.url_map.iter_rules():
        print(f"{sorted(rule.methods)} → {rule.rule} (endpoint={rule.endpoint})")
    print(f"\nServer running on http://localhost:{app.config['PORT']}\n")
    app.run(host='0.0.0.0', port=app.config['PORT'], debug=app.config['DEBUG'])
